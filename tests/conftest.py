"""Pytest configuration and fixtures."""

import pytest

from review_gate.config.settings import Settings

RUNNER_ENV_VARS = (
    "INPUT_TOKEN",
    "INPUT_OWNER",
    "INPUT_REPO",
    "INPUT_PULL_REQUEST_NUMBER",
    "INPUT_TARGET_LOGIN",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_API_URL",
    "LOGFIRE_TOKEN",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove runner variables so tests do not depend on the host CI."""
    for name in RUNNER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings(clean_env: pytest.MonkeyPatch):
    """Return a factory building Settings from the given environment."""

    def _make(**env: str) -> Settings:
        for name, value in env.items():
            clean_env.setenv(name, value)
        return Settings(_env_file=None)

    return _make


@pytest.fixture
def thread_node():
    """Return a builder for reviewThreads nodes."""
    return _thread_node


def _thread_node(is_resolved: bool, *authors: str | None) -> dict:
    """Build a reviewThreads node as returned by the GraphQL API."""
    return {
        "isResolved": is_resolved,
        "comments": {
            "nodes": [
                {"author": {"login": author} if author is not None else None}
                for author in authors
            ]
        },
    }


@pytest.fixture
def graphql_response():
    """Return a builder for GraphQL review threads responses."""
    return _graphql_response


def _graphql_response(*nodes: dict) -> dict:
    """Wrap thread nodes in a full GraphQL response body."""
    return {
        "data": {
            "repository": {
                "pullRequest": {"reviewThreads": {"nodes": list(nodes)}}
            }
        }
    }
