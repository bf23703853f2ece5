"""Detection of unsubmitted reviews."""

from collections.abc import Iterable

from review_gate.models.github_types import Review, ReviewState


def is_pending_review(reviews: Iterable[Review], target_login: str) -> bool:
    """Return True if the target login has a review that is not yet submitted.

    Args:
        reviews: All reviews on the pull request
        target_login: Exact login of the reviewer

    Returns:
        True if any review by target_login is in PENDING state
    """
    return any(
        review.author_login == target_login and review.state == ReviewState.PENDING
        for review in reviews
    )
