"""GitHub-specific type definitions."""

from enum import Enum

from pydantic import BaseModel, Field


class ReviewState(str, Enum):
    """Review states reported by the pull request reviews API."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    CHANGES_REQUESTED = "CHANGES_REQUESTED"
    COMMENTED = "COMMENTED"
    DISMISSED = "DISMISSED"


class ReviewThread(BaseModel):
    """A review thread reduced to what the gate needs.

    ``first_comment_author`` is None when the thread has no comments or
    the first comment was written by a deleted account.
    """

    is_resolved: bool
    first_comment_author: str | None = None


class Review(BaseModel):
    """A pull request review and its submission state."""

    author_login: str | None = None
    state: ReviewState


class CheckInputs(BaseModel):
    """Resolved inputs for a single gate run."""

    token: str = Field(repr=False, min_length=1)
    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    pull_request_number: int = Field(gt=0)
    target_login: str = Field(min_length=1)

    @property
    def repo_full_name(self) -> str:
        """Repository in 'owner/repo' format."""
        return f"{self.owner}/{self.repo}"


class EventContext(BaseModel):
    """Context of the CI event that triggered the run."""

    event_name: str | None = None
    action: str | None = None
    repository: str | None = None
    issue_number: int | None = None

    @property
    def owner(self) -> str | None:
        if not self.repository or "/" not in self.repository:
            return None
        return self.repository.split("/", 1)[0]

    @property
    def repo(self) -> str | None:
        if not self.repository or "/" not in self.repository:
            return None
        return self.repository.split("/", 1)[1]


class GateResult(BaseModel):
    """Outcome of both checks for one pull request."""

    pending_review: bool = False
    unresolved_threads: int = 0

    @property
    def passed(self) -> bool:
        """True when there is no pending review and nothing left unresolved."""
        return not self.pending_review and self.unresolved_threads == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
