"""Logging setup for the catalog CLI.

Library modules only create loggers through `get_logger`; handlers and
levels are configured once by the CLI entry point.
"""

import logging
import sys
from enum import Enum

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
TIMESTAMPED_FORMAT = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"
PLAIN_FORMAT = "%(name)s  %(levelname)s  %(message)s"

# Third-party loggers that log every HTTP request at INFO
CHATTY_LOGGERS = ("opensearch", "urllib3", "botocore")


class LogLevel(Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def numeric(self) -> int:
        return logging.getLevelName(self.value)


def setup_logging(
    level: str | LogLevel = LogLevel.INFO,
    include_timestamp: bool = True,
) -> logging.Logger:
    """Send catalog logs to stderr at the given level.

    Args:
        level: Level name or LogLevel; unknown names fall back to INFO
        include_timestamp: Prefix each record with its time

    Returns:
        The CLI logger

    """
    try:
        log_level = level if isinstance(level, LogLevel) else LogLevel(level.upper())
    except ValueError:
        log_level = LogLevel.INFO

    # stdout carries command output (JSON lines)
    logging.basicConfig(
        level=log_level.numeric,
        format=TIMESTAMPED_FORMAT if include_timestamp else PLAIN_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level.numeric, logging.WARNING))

    return logging.getLogger("catalog-cli")


def get_logger(name: str) -> logging.Logger:
    """Logger for a catalog module, usually `get_logger(__name__)`."""
    return logging.getLogger(name)
