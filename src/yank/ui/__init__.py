"""UI components for terminal output."""

from yank.ui.output import (
    BLUE,
    GRAY,
    GREEN,
    MAGENTA,
    NC,
    RED,
    YELLOW,
    error,
    git_error,
    log,
    success,
    warn,
    warn_with_detail,
)

__all__ = [
    # Colors
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "GRAY",
    "MAGENTA",
    "NC",
    # Functions
    "log",
    "success",
    "warn",
    "error",
    "git_error",
    "warn_with_detail",
]
