"""Terminal output helpers with colors."""

import sys

# Colors
RED = "\033[0;31m"
GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
BLUE = "\033[0;34m"
GRAY = "\033[90m"
MAGENTA = "\033[0;35m"
NC = "\033[0m"


def log(msg: str) -> None:
    print(f"\r\033[K{BLUE}[yank]{NC} {msg}")


def success(msg: str) -> None:
    print(f"\r\033[K{GREEN}[yank]{NC} {msg}")


def warn(msg: str) -> None:
    print(f"\r\033[K{YELLOW}[yank]{NC} {msg}")


def error(msg: str) -> None:
    print(f"\r\033[K{RED}[yank]{NC} {msg}", file=sys.stderr)


def git_error(msg: str, stderr: str, exit_code: int) -> None:
    """Print an error with git's own message and exit code in gray."""
    detail = stderr.strip().replace("\n", " | ") or "no output"
    print(
        f"\r\033[K{RED}[yank]{NC} {msg}  {GRAY}Error {exit_code}: '{detail}'{NC}",
        file=sys.stderr,
    )


def warn_with_detail(msg: str, detail: str) -> None:
    """Print warning message with gray detail."""
    print(f"\r\033[K{YELLOW}[yank]{NC} {msg}  {GRAY}{detail}{NC}")
