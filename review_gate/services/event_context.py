"""Reading the triggering CI event from the GitHub Actions environment."""

import json
import logging
from pathlib import Path
from typing import Any

from review_gate.config.settings import Settings, settings as default_settings
from review_gate.models.github_types import EventContext

logger = logging.getLogger(__name__)


def _load_event_payload(event_path: str | None) -> dict[str, Any]:
    """Load the webhook payload written by the runner.

    Returns an empty dict if the file is absent or unreadable; the payload
    only supplies defaults for inputs that were not given explicitly.
    """
    if not event_path:
        return {}

    path = Path(event_path)
    if not path.is_file():
        logger.debug(f"Event payload not found at {path}")
        return {}

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to read event payload from {path}: {e}")
        return {}

    if not isinstance(payload, dict):
        logger.warning(f"Event payload is not an object: {type(payload)}")
        return {}
    return payload


def _issue_number(payload: dict[str, Any]) -> int | None:
    # Same lookup order as the runner's issue context: issue, pull_request, payload
    for source in (payload.get("issue"), payload.get("pull_request"), payload):
        if isinstance(source, dict) and source.get("number"):
            try:
                return int(source["number"])
            except (TypeError, ValueError):
                return None
    return None


def read_event_context(settings: Settings | None = None) -> EventContext:
    """Build the event context from runner environment variables.

    Args:
        settings: Settings to read from (defaults to the global instance)

    Returns:
        EventContext with whatever the environment provides
    """
    settings = settings or default_settings
    payload = _load_event_payload(settings.github_event_path)

    action = payload.get("action")
    return EventContext(
        event_name=settings.github_event_name,
        action=action if isinstance(action, str) else None,
        repository=settings.github_repository,
        issue_number=_issue_number(payload),
    )
