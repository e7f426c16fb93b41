"""
Structured logging setup for the rule engine.

Every event is processed by structlog and rendered once by a stdlib
``ProcessorFormatter``, so log records from third-party libraries share the
same format as the engine's own events.
"""

import logging
import os
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    CallsiteParameter,
    CallsiteParameterAdder,
    JSONRenderer,
    KeyValueRenderer,
    TimeStamper,
    UnicodeDecoder,
    add_log_level,
)
from structlog.stdlib import BoundLogger, ProcessorFormatter, add_logger_name

from langrules import __version__

SERVICE_NAME = "langrules"


def get_logger(name: str) -> BoundLogger:
    """
    Get a logger bound with the service, its version and the environment.

    Args:
        name: Dotted component name (``application.transform``, ``infrastructure.cache``)
    """
    return structlog.get_logger(name).bind(
        service=SERVICE_NAME,
        version=__version__,
        environment=os.getenv("ENVIRONMENT", "development"),
    )


def configure_logging(
    environment: str = "development",
    log_level: str = "INFO",
    json_logs: bool = True,
    include_caller_info: bool = True,
) -> None:
    """
    Route structlog and stdlib logging through one handler on the root logger.

    Args:
        environment: Environment name; caller info is only added in development
        log_level: Minimum level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render JSON lines instead of key=value pairs
        include_caller_info: Add file, function and line to development logs
    """
    level = _level_number(log_level)
    processors = _shared_processors(include_caller_info and environment == "development")

    structlog.configure(
        processors=[*processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=processors,
            processors=[ProcessorFormatter.remove_processors_meta, _renderer(json_logs)],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def _shared_processors(with_callsite: bool) -> list[Any]:
    processors: list[Any] = [
        merge_contextvars,
        add_log_level,
        add_logger_name,
        TimeStamper(fmt="ISO", utc=True),
        UnicodeDecoder(),
    ]
    if with_callsite:
        processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.FUNC_NAME,
                    CallsiteParameter.LINENO,
                ],
                additional_ignores=["structlog", "logging"],
            )
        )
    return processors


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return JSONRenderer(sort_keys=True)
    return KeyValueRenderer(key_order=["timestamp", "level", "logger", "event"])


def _level_number(level: str) -> int:
    """Translate a level name; unknown names fall back to INFO."""
    number = logging.getLevelName(level.upper())
    return number if isinstance(number, int) else logging.INFO
