"""Request and run-state models for the yank state machine."""

from dataclasses import asdict, dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from yank.constants import DEFAULT_REBASE_MERGES, DEFAULT_START_POINT, REBASE_MERGE_FLAGS
from yank.models.results import StepResult

if TYPE_CHECKING:
    from yank.git.executor import GitExecutor


class YankState(Enum):
    """States in the yank state machine."""

    CAPTURE_SOURCE = auto()  # rev-parse --abbrev-ref HEAD
    RESOLVE_COMMITS = auto()  # Verify every identifier names a commit
    STASH_CHANGES = auto()  # Shelve a dirty working tree
    ENSURE_BRANCH = auto()  # Create destination or reuse it
    CHECKOUT_DESTINATION = auto()
    REPLAY_COMMITS = auto()  # Cherry-pick onto destination
    PUSH_BRANCH = auto()
    CHECKOUT_SOURCE = auto()
    REMOVE_COMMITS = auto()  # Rebase commits out of source
    RESTORE_STASH = auto()
    DONE = auto()  # Terminal: success message
    ROLLBACK = auto()  # Return to source after a fatal step
    ABORTED = auto()  # Terminal: failed


@dataclass(frozen=True)
class YankRequest:
    """Validated CLI options, frozen once defaults are resolved."""

    commits: tuple[str, ...]
    destination_branch: str
    start_point: str = DEFAULT_START_POINT
    push: bool = False
    safe: bool = False
    debug: bool = False
    stash: bool = True
    cwd: str = "."
    remote: Optional[str] = None
    rebase_merges: str = DEFAULT_REBASE_MERGES

    def __post_init__(self) -> None:
        if not self.commits:
            raise ValueError("at least one commit is required")
        if not self.destination_branch:
            raise ValueError("destination branch name is required")
        if self.rebase_merges not in REBASE_MERGE_FLAGS:
            choices = ", ".join(REBASE_MERGE_FLAGS)
            raise ValueError(f"rebase.merges must be one of: {choices}")

    def to_dict(self) -> dict:
        data = asdict(self)
        data["commits"] = list(self.commits)
        return data


@dataclass
class YankContext:
    """State tracked across the yank state machine."""

    request: YankRequest
    executor: "GitExecutor"

    source_branch: str = ""
    # Full commit ids, same order as request.commits
    commit_ids: list[str] = field(default_factory=list)

    stashed: bool = False
    on_destination: bool = False  # HEAD has left the source branch
    branch_created: bool = False

    failed_state: Optional[YankState] = None
    steps: list[StepResult] = field(default_factory=list)
