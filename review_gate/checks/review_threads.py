"""Evaluation of review threads opened by the target login."""

from collections.abc import Iterable

from review_gate.checks.logins import login_matches
from review_gate.models.github_types import ReviewThread


def unresolved_by_target(
    threads: Iterable[ReviewThread], target_login: str
) -> list[ReviewThread]:
    """Select unresolved threads whose first comment was written by the target.

    Args:
        threads: Review threads of the pull request
        target_login: Login to match, with or without its bot suffix

    Returns:
        The matching threads, in input order
    """
    return [
        thread
        for thread in threads
        if not thread.is_resolved
        and login_matches(thread.first_comment_author, target_login)
    ]


def has_unresolved_by_target(
    threads: Iterable[ReviewThread], target_login: str
) -> bool:
    """Return True if at least one thread started by the target is unresolved."""
    return bool(unresolved_by_target(threads, target_login))
