"""
Logging setup for colspec.

Everything logs under the ``colspec`` namespace. The level defaults to INFO
and can be overridden with the ``COLSPEC_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import os
import re

LOGGER_NAME = "colspec"
LEVEL_ENV_VAR = "COLSPEC_LOG_LEVEL"

_DSN_PASSWORD_RE = re.compile(r"(?P<prefix>[a-z][a-z0-9+.\-]*://[^:/@\s]+:)[^@\s]+@", re.IGNORECASE)


class DSNRedactionFilter(logging.Filter):
    """
    Masks DSN passwords written into a log message.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _DSN_PASSWORD_RE.sub(r"\g<prefix>***@", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def resolve_log_level(default: int = logging.INFO) -> int:
    value = os.getenv(LEVEL_ENV_VAR)
    if not value:
        return default
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int | None = None) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    handler.addFilter(DSNRedactionFilter())
    logger.addHandler(handler)
    logger.setLevel(level if level is not None else resolve_log_level())


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
