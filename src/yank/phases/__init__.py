"""Execution phases: the yank state machine."""

from yank.phases.yank import (
    STATE_HANDLERS,
    handle_capture_source,
    handle_checkout_destination,
    handle_checkout_source,
    handle_ensure_branch,
    handle_push_branch,
    handle_remove_commits,
    handle_replay_commits,
    handle_resolve_commits,
    handle_restore_stash,
    handle_rollback,
    handle_stash_changes,
    print_summary,
    run_yank,
)

__all__ = [
    "STATE_HANDLERS",
    "handle_capture_source",
    "handle_resolve_commits",
    "handle_stash_changes",
    "handle_ensure_branch",
    "handle_checkout_destination",
    "handle_replay_commits",
    "handle_push_branch",
    "handle_checkout_source",
    "handle_remove_commits",
    "handle_restore_stash",
    "handle_rollback",
    "print_summary",
    "run_yank",
]
