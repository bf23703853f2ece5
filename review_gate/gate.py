"""Gate orchestration: resolve inputs, run both checks, decide the exit status."""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx
import requests
from github import GithubException

from review_gate.checks.pending_review import is_pending_review
from review_gate.checks.review_threads import unresolved_by_target
from review_gate.config.settings import Settings, settings as default_settings
from review_gate.exceptions import ConfigurationError, GitHubAPIError
from review_gate.models.github_types import CheckInputs, EventContext, GateResult
from review_gate.services.event_context import read_event_context
from review_gate.services.github_client import GitHubReviewClient

logger = logging.getLogger(__name__)

REQUIRED_INPUTS = ("token", "owner", "repo", "pull_request_number", "target_login")


def _first_non_empty(*values: Any) -> Any:
    for value in values:
        if value not in (None, ""):
            return value
    return None


def _parse_pull_request_number(value: Any) -> int | None:
    if value in (None, ""):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring invalid pull request number: {value!r}")
        return None
    return number if number > 0 else None


def collect_inputs(
    settings: Settings,
    event: EventContext,
    overrides: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Gather raw input values, applying fallbacks in priority order.

    Priority: explicit overrides (CLI), action inputs, runner context.

    Returns:
        Mapping of input name to value; unresolved inputs map to None
    """
    overrides = overrides or {}

    return {
        "token": _first_non_empty(
            overrides.get("token"), settings.input_token, settings.github_token
        ),
        "owner": _first_non_empty(
            overrides.get("owner"), settings.input_owner, event.owner
        ),
        "repo": _first_non_empty(
            overrides.get("repo"), settings.input_repo, event.repo
        ),
        "pull_request_number": _parse_pull_request_number(
            _first_non_empty(
                overrides.get("pull_request_number"),
                settings.input_pull_request_number,
                event.issue_number,
            )
        ),
        "target_login": _first_non_empty(
            overrides.get("target_login"), settings.input_target_login
        ),
    }


def validate_inputs(raw: Mapping[str, Any]) -> CheckInputs:
    """Build CheckInputs, failing if any required input is missing.

    Raises:
        ConfigurationError: Listing every missing input
    """
    missing = [name for name in REQUIRED_INPUTS if not raw.get(name)]
    if missing:
        raise ConfigurationError(missing)
    return CheckInputs(**{name: raw[name] for name in REQUIRED_INPUTS})


async def evaluate_gate(inputs: CheckInputs, client: GitHubReviewClient) -> GateResult:
    """Run both checks against one pull request.

    The two fetches are independent and issued concurrently.

    Args:
        inputs: Validated inputs
        client: Client used for both fetches

    Returns:
        GateResult combining the pending review and unresolved thread checks
    """
    target = inputs.target_login
    tasks = [
        asyncio.create_task(
            client.list_reviews(inputs.owner, inputs.repo, inputs.pull_request_number)
        ),
        asyncio.create_task(
            client.fetch_review_threads(
                inputs.owner, inputs.repo, inputs.pull_request_number
            )
        ),
    ]
    try:
        reviews, threads = await asyncio.gather(*tasks)
    except BaseException:
        # The sibling fetch must not outlive the client it runs on
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    pending = is_pending_review(reviews, target)
    if pending:
        logger.info(f"Pull request is pending review by {target}.")

    logger.info("Checking unresolved comments...")
    unresolved = unresolved_by_target(threads, target)
    if unresolved:
        logger.warning(f"Found {len(unresolved)} unresolved comments by {target}.")
    else:
        logger.info(f"All comments by {target} are resolved.")

    return GateResult(pending_review=pending, unresolved_threads=len(unresolved))


async def run_gate(
    settings: Settings | None = None,
    overrides: Mapping[str, Any] | None = None,
    client_factory: Callable[..., GitHubReviewClient] = GitHubReviewClient,
) -> int:
    """Run the gate end to end and return the process exit code.

    Args:
        settings: Settings to read inputs from (defaults to global)
        overrides: Explicit input values taking precedence over settings
        client_factory: Builds the API client from a token

    Returns:
        0 if the gate passed, 1 on gate failure, configuration or fetch error
    """
    settings = settings or default_settings
    event = read_event_context(settings)

    raw = collect_inputs(settings, event, overrides)
    shown = (name for name in REQUIRED_INPUTS if name != "token")
    logger.info("Inputs: " + ", ".join(f"{name}={raw[name]!r}" for name in shown))
    logger.info(f"Event: name={event.event_name!r}, action={event.action!r}")

    try:
        inputs = validate_inputs(raw)
    except ConfigurationError as e:
        logger.error(str(e))
        return 1

    try:
        async with client_factory(inputs.token, settings=settings) as client:
            result = await evaluate_gate(inputs, client)
    except (
        httpx.HTTPError,
        requests.RequestException,
        GithubException,
        GitHubAPIError,
    ) as e:
        logger.error(f"Error fetching review data: {e}")
        return 1

    review_key = f"{inputs.repo_full_name}#{inputs.pull_request_number}"
    if result.passed:
        logger.info(f"Review gate passed for {review_key}")
    else:
        logger.info(f"Review gate failed for {review_key}")
    return result.exit_code
