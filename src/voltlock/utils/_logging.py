"""Logging utilities for voltlock.

This module provides standalone structlog logger factories that write
text-formatted or JSON-formatted logs to stderr or to a log file. Each
logger is self-contained and does not modify global structlog configuration.
"""

import logging
import sys
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

    from voltlock.config import LoggingConfig

LogFormatType = Literal["json", "text"]


def _log_level_from_string(level: str | None) -> int:
    """Convert a log level string to a logging level integer.

    VOLT_DEBUG overrides to DEBUG level. A missing level falls back to
    VOLT_LOG_LEVEL, then WARNING.

    Args:
        level: Log level string (debug, info, warning, error), or None.

    Returns:
        The logging level as an integer.
    """
    if getenv("VOLT_DEBUG", None):
        return logging.DEBUG

    if level is None:
        level = getenv("VOLT_LOG_LEVEL", "warning")

    log_levels = logging.getLevelNamesMapping()
    return log_levels.get(level.upper(), logging.WARNING)


def create_logger(
    level: str | None = None,
    *,
    log_format: LogFormatType = "text",
    log_file: str | Path | None = None,
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a standalone structlog logger.

    Args:
        level: Log level string (debug, info, warning, error).
        log_format: Output format, either "json" or "text".
        log_file: Path to a log file opened in append mode. Logs go to
            stderr when not set.

    Returns:
        A configured FilteringBoundLogger instance.
    """
    effective_level = _log_level_from_string(level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger_factory = structlog.WriteLoggerFactory(file=log_path.open("a"))
    else:
        logger_factory = structlog.WriteLoggerFactory(file=sys.stderr)

    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Text format: "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            logger_factory(),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(effective_level),
            context_class=dict,
        ),
    )


def create_logger_from_config(config: "LoggingConfig") -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger from the logging configuration section.

    Args:
        config: The logging configuration.

    Returns:
        A FilteringBoundLogger instance.
    """
    return create_logger(
        config.level.value,
        log_format=cast("LogFormatType", config.format.value),
        log_file=config.file or None,
    )
