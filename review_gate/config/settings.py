"""Gate settings using Pydantic Settings for environment variable management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Gate settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Action inputs
    # GitHub Actions exposes `with:` inputs as INPUT_<NAME>; unset inputs
    # arrive as empty strings, so empty means "use the fallback"
    input_token: str = Field(
        default="", validation_alias="INPUT_TOKEN", description="API token input"
    )
    input_owner: str = Field(
        default="", validation_alias="INPUT_OWNER", description="Repository owner"
    )
    input_repo: str = Field(
        default="", validation_alias="INPUT_REPO", description="Repository name"
    )
    input_pull_request_number: str = Field(
        default="",
        validation_alias="INPUT_PULL_REQUEST_NUMBER",
        description="Pull request number",
    )
    input_target_login: str = Field(
        default="",
        validation_alias="INPUT_TARGET_LOGIN",
        description="Login whose review activity gates the check",
    )

    # GitHub Actions runner context
    github_token: str | None = Field(
        default=None,
        validation_alias="GITHUB_TOKEN",
        description="Fallback token provided by the workflow",
    )
    github_repository: str | None = Field(
        default=None,
        validation_alias="GITHUB_REPOSITORY",
        description="Current repository in 'owner/repo' format",
    )
    github_event_name: str | None = Field(
        default=None,
        validation_alias="GITHUB_EVENT_NAME",
        description="Name of the triggering event",
    )
    github_event_path: str | None = Field(
        default=None,
        validation_alias="GITHUB_EVENT_PATH",
        description="Path to the JSON webhook payload of the triggering event",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        validation_alias="GITHUB_API_URL",
        description="REST API base URL (GitHub Enterprise uses .../api/v3)",
    )

    # HTTP
    http_timeout: float = Field(
        default=30.0, description="Timeout in seconds for GitHub API calls"
    )

    # Observability
    logfire_token: str | None = Field(
        default=None, description="Pydantic Logfire token for observability"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )

    @property
    def graphql_url(self) -> str:
        """GraphQL endpoint matching the configured REST API base URL."""
        api_url = self.github_api_url.rstrip("/")
        if api_url.endswith("/api/v3"):
            return api_url.removesuffix("/api/v3") + "/api/graphql"
        return api_url + "/graphql"


# Global settings instance
settings = Settings()
