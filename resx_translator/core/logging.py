"""structlog setup shared by every entry point that embeds the translator."""

import logging

import structlog

from resx_translator.core.config import settings


def configure_logging(level: str | None = None) -> None:
    """Install a filtering bound logger at ``level`` (defaults to settings.log_level)."""
    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
