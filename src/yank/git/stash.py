"""Working tree stash operations."""

from yank.constants import STASH_MESSAGE
from yank.git.executor import GitExecutor


def is_working_tree_dirty(executor: GitExecutor) -> bool:
    """True if tracked files have staged or unstaged changes.

    Untracked files are ignored: checkout and cherry-pick leave them alone.
    """
    result = executor.run(["status", "--porcelain", "--untracked-files=no"])
    return bool(result.stdout.strip())


def stash_changes(executor: GitExecutor, message: str = STASH_MESSAGE) -> None:
    executor.run(["stash", "push", "--message", message])


def unstash_changes(executor: GitExecutor) -> None:
    """Re-apply and drop the most recent stash entry."""
    executor.run(["stash", "pop"])
