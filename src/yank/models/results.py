"""Result models for git commands and orchestration steps."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from yank.constants import EXIT_FAILED, EXIT_OK, EXIT_WARNINGS


@dataclass
class CommandResult:
    """Output of a single git invocation."""

    args: list[str]
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class StepStatus(Enum):
    """Outcome of one orchestration step."""

    OK = "ok"
    WARNING = "warning"  # Recoverable, the run continues
    FAILED = "failed"  # Fatal, the run rolls back and stops


@dataclass
class StepResult:
    """Recorded outcome of one orchestration step."""

    step: str
    status: StepStatus
    detail: str = ""
    exit_code: Optional[int] = None


@dataclass
class YankResult:
    """Everything a finished run reports back to the CLI."""

    source_branch: str
    destination_branch: str
    steps: list[StepResult] = field(default_factory=list)

    @property
    def warnings(self) -> list[StepResult]:
        return [s for s in self.steps if s.status == StepStatus.WARNING]

    @property
    def failure(self) -> Optional[StepResult]:
        """First fatal step, if any."""
        for s in self.steps:
            if s.status == StepStatus.FAILED:
                return s
        return None

    @property
    def status(self) -> StepStatus:
        if self.failure:
            return StepStatus.FAILED
        if self.warnings:
            return StepStatus.WARNING
        return StepStatus.OK

    @property
    def exit_code(self) -> int:
        return {
            StepStatus.OK: EXIT_OK,
            StepStatus.WARNING: EXIT_WARNINGS,
            StepStatus.FAILED: EXIT_FAILED,
        }[self.status]
