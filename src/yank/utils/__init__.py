"""Helpers for debug output and branch naming."""

from yank.utils.debug import debug_log
from yank.utils.names import generate_branch_name, get_words

__all__ = [
    "debug_log",
    "generate_branch_name",
    "get_words",
]
