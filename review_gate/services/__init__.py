"""Services for external API interactions."""

from review_gate.services.event_context import read_event_context
from review_gate.services.github_client import GitHubReviewClient

__all__ = ["GitHubReviewClient", "read_event_context"]
