"""
Logging Configuration

Structured logging for MyPass, built on structlog.

Output:
=======
Development (colored console):
    2024-01-15T10:30:00Z [debug    ] REST request to share Folder   folder_id=3

Other environments (JSON, one object per line):
    {"event": "REST request to share Folder", "folder_id": 3, "level": "debug", ...}

Usage:
======
    from mypass.shared.core.logging import logger, get_logger, log_context

    logger.info("Folder shared", folder_id=folder.id, target=login)

    cache_logger = get_logger("mypass.cache")
    cache_logger.debug("Region created", region="Folder")

    # Bind values to every log line emitted while handling this request
    log_context(login=current_user["login"])

Never pass secret payloads (passwords, notes) as log fields.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from mypass.config.settings import settings


def setup_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_output: Force JSON (True) or console (False) rendering;
            defaults to console in development and JSON elsewhere
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    if json_output is None:
        json_output = not settings.is_development

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level_name),
    )

    # SQL echo is driven by DEBUG through the engine, keep the logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_output:
        processors: list[Processor] = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Args:
        name: Logger name (e.g. "mypass.folders")

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """Bind key-value pairs to every subsequent log call in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Drop everything bound with log_context()."""
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("mypass")
