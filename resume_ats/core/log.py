from __future__ import annotations

import logging

import sentry_sdk

from resume_ats.core.config import settings

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None, *, format_string: str | None = None) -> None:
    """Configure root logging for a harness process and enable Sentry when a DSN is set."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=format_string or _DEFAULT_FORMAT,
        force=True,
    )
    if settings.sentry_dsn:
        sentry_sdk.init(dsn=settings.sentry_dsn)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
