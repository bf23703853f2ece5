"""Data models for the review gate."""

from .github_types import (
    CheckInputs,
    EventContext,
    GateResult,
    Review,
    ReviewState,
    ReviewThread,
)

__all__ = [
    "CheckInputs",
    "EventContext",
    "GateResult",
    "Review",
    "ReviewState",
    "ReviewThread",
]
