"""Structured logging for the orgscribe command line.

The rendering core in orgscribe.org never logs; only config loading and
CLI commands emit events. Events are JSON lines appended to
~/.cache/orgscribe/logs/orgscribe.log.
"""

import os
from pathlib import Path
from typing import Any, Optional

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def log_file_path() -> Path:
    """Return the log file location for the current user."""
    return Path.home() / ".cache" / "orgscribe" / "logs" / "orgscribe.log"


def configure_logging(level: Optional[str] = None) -> None:
    """Send structlog events to the orgscribe log file.

    Args:
        level: Minimum level; falls back to ORGSCRIBE_LOG_LEVEL, then INFO.
            Unknown names are treated as INFO. `orgscribe --verbose` passes
            DEBUG, which adds one heading_loaded event per rendered heading.
    """
    log_file = log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    log_level = (level or os.environ.get("ORGSCRIBE_LOG_LEVEL", "INFO")).upper()
    if log_level not in LOG_LEVELS:
        log_level = "INFO"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=open(log_file, "a")),
        # Reconfiguring (e.g. a new HOME) must take effect on existing loggers
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger; call with __name__."""
    return structlog.get_logger(name)
