"""Git error classification from stderr text."""

import re
from enum import Enum
from typing import Optional

from yank.models.results import CommandResult


class GitErrorKind(Enum):
    """Known categories of git failures."""

    BRANCH_ALREADY_EXISTS = "branch-already-exists"
    EMPTY_CHERRY_PICK = "empty-cherry-pick"
    MERGE_CONFLICTS = "merge-conflicts"
    BAD_REVISION = "bad-revision"
    NOT_A_REPOSITORY = "not-a-repository"
    LOCAL_CHANGES_OVERWRITTEN = "local-changes-overwritten"
    PUSH_REJECTED = "push-rejected"
    NO_UPSTREAM = "no-upstream"


# First match wins; more specific patterns go first
ERROR_PATTERNS: list[tuple[GitErrorKind, re.Pattern]] = [
    (GitErrorKind.BRANCH_ALREADY_EXISTS, re.compile(r"a branch named '.+' already exists", re.I)),
    (GitErrorKind.EMPTY_CHERRY_PICK, re.compile(r"previous cherry-pick is now empty", re.I)),
    (
        GitErrorKind.LOCAL_CHANGES_OVERWRITTEN,
        re.compile(r"local changes to the following files would be overwritten", re.I),
    ),
    (GitErrorKind.MERGE_CONFLICTS, re.compile(r"could not apply|^CONFLICT \(", re.I | re.M)),
    (
        GitErrorKind.BAD_REVISION,
        re.compile(
            r"bad revision|bad object|unknown revision|needed a single revision"
            r"|not a valid object name|invalid reference",
            re.I,
        ),
    ),
    (GitErrorKind.NOT_A_REPOSITORY, re.compile(r"not a git repository", re.I)),
    (GitErrorKind.NO_UPSTREAM, re.compile(r"has no upstream branch", re.I)),
    (GitErrorKind.PUSH_REJECTED, re.compile(r"\[rejected\]|failed to push some refs", re.I)),
]


def classify_error(stderr: str) -> Optional[GitErrorKind]:
    """Map git's stderr text to a known error kind, or None if unrecognized."""
    if not stderr:
        return None
    for kind, pattern in ERROR_PATTERNS:
        if pattern.search(stderr):
            return kind
    return None


class GitCommandError(Exception):
    """A git invocation exited non-zero."""

    def __init__(self, result: CommandResult, kind: Optional[GitErrorKind] = None) -> None:
        super().__init__(f"Error {result.exit_code}: '{result.stderr.strip()}'")
        self.result = result
        self.kind = kind

    @property
    def exit_code(self) -> int:
        return self.result.exit_code

    @property
    def stderr(self) -> str:
        return self.result.stderr.strip()
