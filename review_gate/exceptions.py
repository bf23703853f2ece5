"""Exceptions raised by the review gate."""


class ConfigurationError(ValueError):
    """Raised when required inputs are missing or invalid."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required inputs: {', '.join(missing)}")


class GitHubAPIError(RuntimeError):
    """Raised when the GitHub API returns an unusable response."""
