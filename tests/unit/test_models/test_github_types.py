"""Unit tests for gate data models."""

import pytest
from pydantic import ValidationError

from review_gate.models.github_types import (
    CheckInputs,
    EventContext,
    GateResult,
    Review,
    ReviewState,
)


class TestCheckInputs:
    """Test suite for CheckInputs model."""

    def _inputs(self, **overrides) -> CheckInputs:
        values = {
            "token": "ghs_test",  # pragma: allowlist secret
            "owner": "owner",
            "repo": "repo",
            "pull_request_number": 1,
            "target_login": "copilot[bot]",
        }
        values.update(overrides)
        return CheckInputs(**values)

    def test_valid_inputs(self) -> None:
        inputs = self._inputs()

        assert inputs.repo_full_name == "owner/repo"

    def test_token_hidden_from_repr(self) -> None:
        assert "ghs_test" not in repr(self._inputs())

    @pytest.mark.parametrize("field", ["token", "owner", "repo", "target_login"])
    def test_empty_string_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            self._inputs(**{field: ""})

    @pytest.mark.parametrize("number", [0, -1])
    def test_non_positive_pull_request_number_rejected(self, number: int) -> None:
        with pytest.raises(ValidationError):
            self._inputs(pull_request_number=number)


class TestGateResult:
    """Test suite for GateResult model."""

    def test_passes_when_nothing_outstanding(self) -> None:
        result = GateResult()

        assert result.passed
        assert result.exit_code == 0

    def test_pending_review_fails(self) -> None:
        result = GateResult(pending_review=True)

        assert not result.passed
        assert result.exit_code == 1

    def test_unresolved_threads_fail(self) -> None:
        result = GateResult(unresolved_threads=2)

        assert not result.passed
        assert result.exit_code == 1


def test_review_state_from_api_string() -> None:
    assert Review(author_login="a", state="CHANGES_REQUESTED").state is (
        ReviewState.CHANGES_REQUESTED
    )


def test_review_rejects_unknown_state() -> None:
    with pytest.raises(ValidationError):
        Review(author_login="a", state="MERGED")


def test_event_context_without_slash() -> None:
    event = EventContext(repository="not-a-full-name")

    assert event.owner is None
    assert event.repo is None
