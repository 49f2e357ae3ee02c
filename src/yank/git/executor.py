"""Synchronous git process runner."""

import shlex
import subprocess
from typing import Optional, Sequence

from yank.git.errors import GitCommandError, GitErrorKind, classify_error
from yank.models.results import CommandResult
from yank.ui.output import GRAY, MAGENTA, NC


class GitExecutor:
    """Runs git subcommands one at a time in a working directory.

    Each call blocks until git exits. There is no timeout: a git prompt
    waiting for input hangs the run.
    """

    def __init__(self, cwd: str = ".", debug: bool = False, git: str = "git") -> None:
        self.cwd = cwd
        self.debug = debug
        self.git = git

    def execute(self, args: Sequence[str], cwd: Optional[str] = None) -> CommandResult:
        """Run `git <args>` and return its output, whatever the exit code."""
        argv = [self.git, *args]
        if self.debug:
            print(f"\r\033[K{MAGENTA}[debug]{NC} {GRAY}{shlex.join(argv)}{NC}")
        result = subprocess.run(argv, cwd=cwd or self.cwd, capture_output=True, text=True)
        return CommandResult(
            args=list(args),
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            exit_code=result.returncode,
        )

    def run(self, args: Sequence[str]) -> CommandResult:
        """Run `git <args>`, raising GitCommandError on a non-zero exit."""
        result = self.execute(args)
        if not result.ok:
            raise GitCommandError(result, self.classify_error(result.stderr))
        return result

    def classify_error(self, stderr: str) -> Optional[GitErrorKind]:
        return classify_error(stderr)
