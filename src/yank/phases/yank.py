"""Yank state machine: move commits from the current branch to another."""

from typing import Callable, Optional

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
    skip_cherry_pick,
)
from yank.git.errors import GitCommandError, GitErrorKind
from yank.git.executor import GitExecutor
from yank.git.stash import is_working_tree_dirty, stash_changes, unstash_changes
from yank.models.results import StepResult, StepStatus, YankResult
from yank.models.state import YankContext, YankRequest, YankState
from yank.ui.output import NC, YELLOW, error, git_error, log, success, warn, warn_with_detail
from yank.utils.debug import debug_log


def short(commit_id: str) -> str:
    return commit_id[:8]


def _record(
    ctx: YankContext,
    state: YankState,
    status: StepStatus,
    detail: str = "",
    exit_code: Optional[int] = None,
) -> None:
    ctx.steps.append(StepResult(state.name.lower(), status, detail, exit_code))


def _fail(
    ctx: YankContext, state: YankState, msg: str, exc: Optional[GitCommandError] = None
) -> YankState:
    """Report a fatal step and route to rollback."""
    if exc:
        git_error(msg, exc.stderr, exc.exit_code)
        _record(ctx, state, StepStatus.FAILED, f"{msg}: {exc.stderr}", exc.exit_code)
    else:
        error(msg)
        _record(ctx, state, StepStatus.FAILED, msg)
    ctx.failed_state = state
    return YankState.ROLLBACK


def _warn(ctx: YankContext, state: YankState, msg: str, exc: GitCommandError) -> None:
    """Report a recoverable step; the run carries on."""
    warn_with_detail(msg, f"Error {exc.exit_code}: '{exc.stderr or 'no output'}'")
    _record(ctx, state, StepStatus.WARNING, f"{msg}: {exc.stderr}", exc.exit_code)


def handle_capture_source(ctx: YankContext) -> YankState:
    state = YankState.CAPTURE_SOURCE
    try:
        branch = get_current_branch(ctx.executor)
    except GitCommandError as e:
        return _fail(ctx, state, "Could not determine the current branch", e)

    if not branch or branch == "HEAD":
        return _fail(ctx, state, "HEAD is detached. Check out the branch to yank from first.")
    if branch == ctx.request.destination_branch:
        return _fail(ctx, state, f"Destination branch '{branch}' is the current branch")

    ctx.source_branch = branch
    _record(ctx, state, StepStatus.OK, branch)
    debug_log(ctx.request, f"Source Branch Name: {branch}", ctx.request.to_dict())
    return YankState.RESOLVE_COMMITS


def handle_resolve_commits(ctx: YankContext) -> YankState:
    state = YankState.RESOLVE_COMMITS
    commit_ids = []
    for ref in ctx.request.commits:
        try:
            commit_ids.append(resolve_commit(ctx.executor, ref))
        except GitCommandError as e:
            return _fail(ctx, state, f"'{ref}' does not name a commit", e)

    ctx.commit_ids = commit_ids
    _record(ctx, state, StepStatus.OK, ", ".join(short(c) for c in commit_ids))
    return YankState.STASH_CHANGES


def handle_stash_changes(ctx: YankContext) -> YankState:
    if not ctx.request.stash:
        return YankState.ENSURE_BRANCH

    state = YankState.STASH_CHANGES
    try:
        if not is_working_tree_dirty(ctx.executor):
            return YankState.ENSURE_BRANCH
        stash_changes(ctx.executor)
    except GitCommandError as e:
        return _fail(ctx, state, "Could not stash uncommitted changes", e)

    ctx.stashed = True
    log("Stashed uncommitted changes. They will be restored when done.")
    _record(ctx, state, StepStatus.OK, "stashed")
    return YankState.ENSURE_BRANCH


def handle_ensure_branch(ctx: YankContext) -> YankState:
    state = YankState.ENSURE_BRANCH
    dest = ctx.request.destination_branch
    start_point = ctx.request.start_point
    try:
        created = create_branch(ctx.executor, dest, start_point)
    except GitCommandError as e:
        return _fail(ctx, state, f"Could not create branch '{dest}' from '{start_point}'", e)

    ctx.branch_created = created
    if created:
        success(f"Created a branch named '{dest}'. Commits will be moved to that branch.")
        _record(ctx, state, StepStatus.OK, f"created from {start_point}")
    else:
        log(f"Moving commits to the existing branch named '{dest}'.")
        _record(ctx, state, StepStatus.OK, "already exists")
    return YankState.CHECKOUT_DESTINATION


def handle_checkout_destination(ctx: YankContext) -> YankState:
    state = YankState.CHECKOUT_DESTINATION
    dest = ctx.request.destination_branch
    try:
        checkout_branch(ctx.executor, dest)
    except GitCommandError as e:
        return _fail(ctx, state, f"Could not check out '{dest}'", e)

    ctx.on_destination = True
    _record(ctx, state, StepStatus.OK, dest)
    return YankState.REPLAY_COMMITS


def handle_replay_commits(ctx: YankContext) -> YankState:
    state = YankState.REPLAY_COMMITS
    dest = ctx.request.destination_branch
    picked = 0
    for ref, commit_id in zip(ctx.request.commits, ctx.commit_ids):
        try:
            cherry_pick(ctx.executor, commit_id)
        except GitCommandError as e:
            if e.kind == GitErrorKind.EMPTY_CHERRY_PICK and skip_cherry_pick(ctx.executor):
                _warn(ctx, state, f"Skipped {ref}, its changes are already on '{dest}'", e)
                continue

            msg = f"Could not cherry-pick {ref} onto '{dest}'"
            if e.kind == GitErrorKind.MERGE_CONFLICTS:
                msg += " (conflicts)"
            if not abort_cherry_pick(ctx.executor):
                msg += ". Run `git cherry-pick --abort` to clean up"
            return _fail(ctx, state, msg, e)

        picked += 1
        log(f"Cherry-picked {YELLOW}{ref}{NC} onto '{dest}'")

    _record(ctx, state, StepStatus.OK, f"{picked} commit(s)")
    return YankState.PUSH_BRANCH


def handle_push_branch(ctx: YankContext) -> YankState:
    if not ctx.request.push:
        return YankState.CHECKOUT_SOURCE

    state = YankState.PUSH_BRANCH
    dest = ctx.request.destination_branch
    try:
        output = push_branch(ctx.executor, dest, ctx.request.remote)
    except GitCommandError as e:
        msg = f"Could not push '{dest}'"
        if e.kind == GitErrorKind.NO_UPSTREAM:
            msg += " (no upstream; set push.remote in .git-yank/config.yaml)"
        _warn(ctx, state, msg, e)
        return YankState.CHECKOUT_SOURCE

    success(f"Pushed '{dest}'")
    debug_log(ctx.request, "git push", output)
    _record(ctx, state, StepStatus.OK, ctx.request.remote or "upstream")
    return YankState.CHECKOUT_SOURCE


def handle_checkout_source(ctx: YankContext) -> YankState:
    state = YankState.CHECKOUT_SOURCE
    try:
        checkout_branch(ctx.executor, ctx.source_branch)
    except GitCommandError as e:
        return _fail(ctx, state, f"Could not return to '{ctx.source_branch}'", e)

    ctx.on_destination = False
    _record(ctx, state, StepStatus.OK, ctx.source_branch)
    if ctx.request.safe:
        log(f"Safe mode: commits left in place on '{ctx.source_branch}'")
        return YankState.RESTORE_STASH
    return YankState.REMOVE_COMMITS


def handle_remove_commits(ctx: YankContext) -> YankState:
    """Rebase each yanked commit out of the source branch.

    Commits go newest first: rewriting history above a commit never changes
    the id of an older one, so ids still to be removed stay valid.
    """
    state = YankState.REMOVE_COMMITS
    source = ctx.source_branch
    try:
        history = list_branch_commits(ctx.executor, source)
    except GitCommandError as e:
        _warn(ctx, state, f"Could not read history of '{source}', commits left in place", e)
        return YankState.RESTORE_STASH

    position = {commit_id: i for i, commit_id in enumerate(history)}
    pending = []
    for commit_id, ref in dict(zip(ctx.commit_ids, ctx.request.commits)).items():
        if commit_id not in position:
            warn(f"{ref} is not on '{source}', nothing to remove")
            _record(ctx, state, StepStatus.WARNING, f"{ref} is not on {source}")
            continue
        pending.append((ref, commit_id))
    pending.sort(key=lambda item: position[item[1]])

    removed = 0
    for ref, commit_id in pending:
        try:
            remove_commit(ctx.executor, commit_id, source, ctx.request.rebase_merges)
        except GitCommandError as e:
            msg = f"Could not remove {ref} from '{source}'"
            if not abort_rebase(ctx.executor):
                msg += ". Run `git rebase --abort` to clean up"
            _warn(ctx, state, msg, e)
            continue
        removed += 1
        log(f"Removed {YELLOW}{ref}{NC} from '{source}'")

    if removed:
        _record(ctx, state, StepStatus.OK, f"{removed} commit(s)")
    return YankState.RESTORE_STASH


def handle_restore_stash(ctx: YankContext) -> YankState:
    if not ctx.stashed:
        return YankState.DONE

    state = YankState.RESTORE_STASH
    try:
        unstash_changes(ctx.executor)
    except GitCommandError as e:
        _warn(ctx, state, "Could not restore stashed changes, see `git stash list`", e)
        return YankState.DONE

    ctx.stashed = False
    log("Restored stashed changes")
    _record(ctx, state, StepStatus.OK, "restored")
    return YankState.DONE


def handle_rollback(ctx: YankContext) -> YankState:
    """Put HEAD and the working tree back where the run found them."""
    state = YankState.ROLLBACK
    source = ctx.source_branch
    if ctx.on_destination and ctx.failed_state != YankState.CHECKOUT_SOURCE:
        try:
            checkout_branch(ctx.executor, source)
            ctx.on_destination = False
            log(f"Returned to '{source}'")
        except GitCommandError as e:
            _warn(ctx, state, f"Could not return to '{source}'", e)

    if ctx.stashed:
        if ctx.on_destination:
            warn(f"Uncommitted changes are still stashed. Run `git stash pop` on '{source}'.")
        else:
            try:
                unstash_changes(ctx.executor)
                ctx.stashed = False
                log("Restored stashed changes")
            except GitCommandError as e:
                _warn(ctx, state, "Could not restore stashed changes, see `git stash list`", e)

    if ctx.branch_created:
        dest = ctx.request.destination_branch
        warn(
            f"Branch '{dest}' was created by this run and left in place. "
            f"Delete it with `git branch -D {dest}` if unwanted."
        )
    return YankState.ABORTED


STATE_HANDLERS: dict[YankState, Callable[[YankContext], YankState]] = {
    YankState.CAPTURE_SOURCE: handle_capture_source,
    YankState.RESOLVE_COMMITS: handle_resolve_commits,
    YankState.STASH_CHANGES: handle_stash_changes,
    YankState.ENSURE_BRANCH: handle_ensure_branch,
    YankState.CHECKOUT_DESTINATION: handle_checkout_destination,
    YankState.REPLAY_COMMITS: handle_replay_commits,
    YankState.PUSH_BRANCH: handle_push_branch,
    YankState.CHECKOUT_SOURCE: handle_checkout_source,
    YankState.REMOVE_COMMITS: handle_remove_commits,
    YankState.RESTORE_STASH: handle_restore_stash,
    YankState.ROLLBACK: handle_rollback,
}


def print_summary(result: YankResult) -> None:
    dest = result.destination_branch
    failure = result.failure
    if failure:
        error(f"Yank aborted at {failure.step.replace('_', ' ')}. '{dest}' may be incomplete.")
    elif result.warnings:
        warn(
            f"Yanked the specified commits to a branch named {dest} "
            f"with {len(result.warnings)} warning(s)."
        )
    else:
        success(f"Successfully yanked the specified commits to a branch named {dest}.")


def run_yank(request: YankRequest, executor: Optional[GitExecutor] = None) -> YankResult:
    """Run the yank state machine to completion. Returns the step-by-step result."""
    executor = executor or GitExecutor(cwd=request.cwd, debug=request.debug)
    ctx = YankContext(request=request, executor=executor)

    state = YankState.CAPTURE_SOURCE
    while state not in (YankState.DONE, YankState.ABORTED):
        state = STATE_HANDLERS[state](ctx)

    result = YankResult(
        source_branch=ctx.source_branch,
        destination_branch=request.destination_branch,
        steps=ctx.steps,
    )
    print_summary(result)
    return result
