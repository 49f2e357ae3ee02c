"""Data models for git-yank."""

from yank.models.results import CommandResult, StepResult, StepStatus, YankResult
from yank.models.state import YankContext, YankRequest, YankState

__all__ = [
    # Results
    "CommandResult",
    "StepResult",
    "StepStatus",
    "YankResult",
    # State
    "YankContext",
    "YankRequest",
    "YankState",
]
