"""Pure decision functions over fetched review data."""

from .logins import BOT_SUFFIX, login_matches, normalize_login
from .pending_review import is_pending_review
from .review_threads import has_unresolved_by_target, unresolved_by_target

__all__ = [
    "BOT_SUFFIX",
    "has_unresolved_by_target",
    "is_pending_review",
    "login_matches",
    "normalize_login",
    "unresolved_by_target",
]
