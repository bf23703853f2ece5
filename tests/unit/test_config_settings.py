from review_gate.config.settings import Settings


def test_settings_defaults(clean_env) -> None:
    settings = Settings(_env_file=None)

    assert settings.input_token == ""
    assert settings.input_target_login == ""
    assert settings.github_token is None
    assert settings.github_repository is None
    assert settings.github_api_url == "https://api.github.com"
    assert settings.http_timeout == 30.0
    assert settings.log_level == "INFO"


def test_action_inputs_from_env(clean_env) -> None:
    clean_env.setenv("INPUT_TOKEN", "ghs_input")  # pragma: allowlist secret
    clean_env.setenv("INPUT_OWNER", "octo-org")
    clean_env.setenv("INPUT_REPO", "octo-repo")
    clean_env.setenv("INPUT_PULL_REQUEST_NUMBER", "42")
    clean_env.setenv("INPUT_TARGET_LOGIN", "copilot[bot]")

    settings = Settings(_env_file=None)

    assert settings.input_token == "ghs_input"  # pragma: allowlist secret
    assert settings.input_owner == "octo-org"
    assert settings.input_repo == "octo-repo"
    assert settings.input_pull_request_number == "42"
    assert settings.input_target_login == "copilot[bot]"


def test_runner_context_from_env(clean_env) -> None:
    clean_env.setenv("GITHUB_TOKEN", "ghs_runner")  # pragma: allowlist secret
    clean_env.setenv("GITHUB_REPOSITORY", "octo-org/octo-repo")
    clean_env.setenv("GITHUB_EVENT_NAME", "pull_request_target")

    settings = Settings(_env_file=None)

    assert settings.github_token == "ghs_runner"  # pragma: allowlist secret
    assert settings.github_repository == "octo-org/octo-repo"
    assert settings.github_event_name == "pull_request_target"


def test_graphql_url_public(clean_env) -> None:
    assert Settings(_env_file=None).graphql_url == "https://api.github.com/graphql"


def test_graphql_url_enterprise(clean_env) -> None:
    clean_env.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3/")

    assert Settings(_env_file=None).graphql_url == "https://ghe.example.com/api/graphql"
