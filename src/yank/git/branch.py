"""Branch management operations."""

from yank.git.errors import GitCommandError, GitErrorKind
from yank.git.executor import GitExecutor


def get_current_branch(executor: GitExecutor) -> str:
    """Get current git branch name ("HEAD" when detached)."""
    result = executor.run(["rev-parse", "--abbrev-ref", "HEAD"])
    return result.stdout.strip()


def resolve_commit(executor: GitExecutor, ref: str) -> str:
    """Resolve a commit identifier (sha, tag, HEAD~2, ...) to its full id."""
    result = executor.run(["rev-parse", "--verify", "--quiet", f"{ref}^{{commit}}"])
    return result.stdout.strip()


def create_branch(executor: GitExecutor, name: str, start_point: str) -> bool:
    """Create branch at start_point. Returns False if it already exists.

    Any other failure raises GitCommandError.
    """
    try:
        executor.run(["branch", name, start_point])
    except GitCommandError as e:
        if e.kind == GitErrorKind.BRANCH_ALREADY_EXISTS:
            return False
        raise
    return True


def checkout_branch(executor: GitExecutor, name: str) -> None:
    executor.run(["checkout", name])


def list_branch_commits(executor: GitExecutor, branch: str) -> list[str]:
    """Commit ids reachable from branch, newest first."""
    result = executor.run(["rev-list", "--topo-order", branch])
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]
