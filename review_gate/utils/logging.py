"""Logging and observability setup using Pydantic Logfire."""

import logging
import sys

from review_gate.config.settings import Settings, settings as default_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure gate logging.

    Logs go to stdout so they appear inline in the CI job output.
    Reduces noise from verbose third-party libraries.
    """
    settings = settings or default_settings
    log_level = getattr(logging, settings.log_level)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,  # Reconfigure if already setup
    )

    # Reduce noise from verbose libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("github").setLevel(logging.WARNING)


def setup_observability(settings: Settings | None = None) -> None:
    """Setup logging and, if a token is configured, Logfire tracing of httpx."""
    settings = settings or default_settings
    setup_logging(settings)

    logger = logging.getLogger(__name__)

    if not settings.logfire_token:
        logger.debug("Logfire token not configured, skipping observability setup")
        return

    try:
        import logfire

        logfire.configure(token=settings.logfire_token)
        logfire.instrument_httpx()
        logger.info("Logfire observability enabled")
    except ImportError:
        logger.warning(
            "Logfire package not installed. Install with: pip install 'review-gate[logfire]'"
        )
    except Exception as e:
        logger.error(f"Failed to setup Logfire observability: {e}")
