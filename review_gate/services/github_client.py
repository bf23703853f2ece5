"""GitHub API client for review threads and reviews."""

import asyncio
import logging
from typing import Any

import httpx
from github import Auth, Github

from review_gate.config.settings import Settings, settings as default_settings
from review_gate.exceptions import GitHubAPIError
from review_gate.models.github_types import Review, ReviewState, ReviewThread

logger = logging.getLogger(__name__)

# GraphQL connections are capped at 100 nodes per page
REVIEW_THREADS_QUERY = """
query FetchReviewThreads($owner: String!, $repo: String!, $pullRequestNumber: Int!) {
  repository(owner: $owner, name: $repo) {
    pullRequest(number: $pullRequestNumber) {
      reviewThreads(last: 100) {
        nodes {
          isResolved
          comments(first: 1) {
            nodes {
              author {
                login
              }
            }
          }
        }
      }
    }
  }
}
"""


def parse_review_threads(data: dict[str, Any]) -> list[ReviewThread]:
    """Convert a review threads GraphQL response into ReviewThread models.

    Args:
        data: Decoded JSON body of the GraphQL response

    Returns:
        One ReviewThread per thread node

    Raises:
        GitHubAPIError: If the response carries errors or no pull request
    """
    if data.get("errors"):
        messages = "; ".join(
            str(error.get("message", error)) if isinstance(error, dict) else str(error)
            for error in data["errors"]
        )
        raise GitHubAPIError(f"GraphQL error: {messages}")

    repository = (data.get("data") or {}).get("repository") or {}
    pull_request = repository.get("pullRequest")
    if not pull_request:
        raise GitHubAPIError("Pull request not found in GraphQL response")

    nodes = (pull_request.get("reviewThreads") or {}).get("nodes") or []

    threads = []
    for node in nodes:
        comments = (node.get("comments") or {}).get("nodes") or []
        author = (comments[0].get("author") or {}) if comments else {}
        threads.append(
            ReviewThread(
                is_resolved=bool(node.get("isResolved")),
                first_comment_author=author.get("login"),
            )
        )
    return threads


class GitHubReviewClient:
    """Read-only access to the review data of a pull request.

    Review threads come from the GraphQL API through httpx; reviews come
    from the REST API through PyGithub.
    """

    def __init__(
        self,
        token: str,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        github_client: Github | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: Bearer token for both APIs
            settings: Settings for API URLs and timeouts (defaults to global)
            http_client: Optional preconfigured async HTTP client
            github_client: Optional preconfigured PyGithub client
        """
        self.settings = settings or default_settings
        self._owns_http_client = http_client is None

        headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if http_client is None:
            http_client = httpx.AsyncClient(
                headers=headers, timeout=self.settings.http_timeout
            )
        self.http_client = http_client

        if github_client is None:
            github_client = Github(
                auth=Auth.Token(token),
                base_url=self.settings.github_api_url.rstrip("/"),
                timeout=max(1, round(self.settings.http_timeout)),
                per_page=100,
                retry=None,
            )
        self.github_client = github_client

    async def __aenter__(self) -> "GitHubReviewClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release the underlying HTTP connections."""
        if self._owns_http_client:
            await self.http_client.aclose()
        self.github_client.close()

    async def fetch_review_threads(
        self, owner: str, repo: str, pull_request_number: int
    ) -> list[ReviewThread]:
        """Fetch the last 100 review threads of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pull_request_number: Pull request number

        Returns:
            List of review threads

        Raises:
            httpx.HTTPError: If the request fails or returns an error status
            GitHubAPIError: If the GraphQL response carries errors
        """
        response = await self.http_client.post(
            self.settings.graphql_url,
            json={
                "query": REVIEW_THREADS_QUERY,
                "variables": {
                    "owner": owner,
                    "repo": repo,
                    "pullRequestNumber": pull_request_number,
                },
            },
        )
        response.raise_for_status()

        threads = parse_review_threads(response.json())
        logger.debug(
            f"Review threads for {owner}/{repo}#{pull_request_number}: {threads}"
        )
        return threads

    def _list_reviews_sync(
        self, owner: str, repo: str, pull_request_number: int
    ) -> list[Review]:
        repository = self.github_client.get_repo(f"{owner}/{repo}", lazy=True)
        pull_request = repository.get_pull(pull_request_number)

        known_states = {state.value for state in ReviewState}
        reviews = []
        for review in pull_request.get_reviews():
            if review.state not in known_states:
                # Unknown states are never pending
                logger.warning(f"Skipping review with unknown state {review.state!r}")
                continue
            reviews.append(
                Review(
                    author_login=review.user.login if review.user else None,
                    state=ReviewState(review.state),
                )
            )
        return reviews

    async def list_reviews(
        self, owner: str, repo: str, pull_request_number: int
    ) -> list[Review]:
        """List all reviews of a pull request.

        PyGithub is blocking, so the call runs in a worker thread.

        Raises:
            GithubException: If the GitHub API returns an error status
            requests.RequestException: If the request cannot be completed
        """
        reviews = await asyncio.to_thread(
            self._list_reviews_sync, owner, repo, pull_request_number
        )
        logger.debug(f"Reviews for {owner}/{repo}#{pull_request_number}: {reviews}")
        return reviews
