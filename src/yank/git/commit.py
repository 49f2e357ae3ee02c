"""Commit replay, removal and push operations."""

from typing import Optional

from yank.constants import DEFAULT_REBASE_MERGES, REBASE_MERGE_FLAGS
from yank.git.executor import GitExecutor


def cherry_pick(executor: GitExecutor, commit: str) -> None:
    """Apply a single commit onto the checked out branch."""
    executor.run(["cherry-pick", commit])


def abort_cherry_pick(executor: GitExecutor) -> bool:
    """Abandon an in-progress cherry-pick. Returns True if git accepted it."""
    return executor.execute(["cherry-pick", "--abort"]).ok


def skip_cherry_pick(executor: GitExecutor) -> bool:
    """Drop an in-progress cherry-pick that turned out empty."""
    return executor.execute(["cherry-pick", "--skip"]).ok


def push_branch(executor: GitExecutor, branch: str, remote: Optional[str] = None) -> str:
    """Push the checked out branch. Returns git's output for display.

    Without a remote, plain `git push` follows the configured upstream.
    """
    args = ["push"]
    if remote:
        args += ["--set-upstream", remote, branch]
    result = executor.run(args)
    # git reports push progress on stderr
    return (result.stdout + result.stderr).strip()


def remove_commit_args(commit: str, branch: str, merges: str = DEFAULT_REBASE_MERGES) -> list[str]:
    """Build the rebase that drops commit from branch, keeping later history."""
    if merges not in REBASE_MERGE_FLAGS:
        raise ValueError(f"Unknown rebase merge strategy: {merges}")
    args = ["rebase"]
    flag = REBASE_MERGE_FLAGS[merges]
    if flag:
        args.append(flag)
    args += ["--onto", f"{commit}~1", commit, branch]
    return args


def remove_commit(
    executor: GitExecutor, commit: str, branch: str, merges: str = DEFAULT_REBASE_MERGES
) -> None:
    executor.run(remove_commit_args(commit, branch, merges))


def abort_rebase(executor: GitExecutor) -> bool:
    """Abandon an in-progress rebase. Returns True if git accepted it."""
    return executor.execute(["rebase", "--abort"]).ok
