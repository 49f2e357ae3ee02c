"""Git operations used to move commits between branches."""

from yank.git.branch import (
    checkout_branch,
    create_branch,
    get_current_branch,
    list_branch_commits,
    resolve_commit,
)
from yank.git.commit import (
    abort_cherry_pick,
    abort_rebase,
    cherry_pick,
    push_branch,
    remove_commit,
    remove_commit_args,
    skip_cherry_pick,
)
from yank.git.errors import GitCommandError, GitErrorKind, classify_error
from yank.git.executor import GitExecutor
from yank.git.stash import is_working_tree_dirty, stash_changes, unstash_changes

__all__ = [
    # Executor
    "GitExecutor",
    # Errors
    "GitCommandError",
    "GitErrorKind",
    "classify_error",
    # Branch
    "get_current_branch",
    "resolve_commit",
    "create_branch",
    "checkout_branch",
    "list_branch_commits",
    # Commit
    "cherry_pick",
    "abort_cherry_pick",
    "skip_cherry_pick",
    "push_branch",
    "remove_commit",
    "remove_commit_args",
    "abort_rebase",
    # Stash
    "is_working_tree_dirty",
    "stash_changes",
    "unstash_changes",
]
