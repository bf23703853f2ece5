"""Login normalization for bot accounts.

GitHub reports a bot's login with a ``[bot]`` suffix in the REST API
(``copilot[bot]``) but without it on GraphQL comment authors (``copilot``).
"""

BOT_SUFFIX = "[bot]"


def normalize_login(login: str) -> str:
    """Strip a trailing bot suffix from a login.

    Args:
        login: Account login, e.g. "copilot-pull-request-reviewer[bot]"

    Returns:
        The login without the suffix; unchanged if it has none
    """
    return login.removesuffix(BOT_SUFFIX)


def login_matches(author: str | None, target_login: str) -> bool:
    """Check whether an author login refers to the target account.

    Matches the target exactly or with its bot suffix removed. An absent
    author never matches.
    """
    if not author:
        return False
    return author in (target_login, normalize_login(target_login))
