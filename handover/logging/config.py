"""structlog setup for the API, the CLI server command and tests.

Events go to stdout through the standard library root logger, rendered as
JSON lines or as colored console output. Request context bound with
``handover.logging.set_correlation_id`` is merged into every event.
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import Processor

LogFormat = Literal["json", "console"]

_SHARED_PROCESSORS: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=False),
    structlog.contextvars.merge_contextvars,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _renderer(log_format: str) -> Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(exception_formatter=structlog.dev.plain_traceback)


def setup_logging(
    service_name: str | None = None,
    log_format: LogFormat | None = None,
    log_level: str | None = None,
) -> None:
    """Configure logging once per process.

    Unset arguments fall back to SERVICE_NAME, LOG_FORMAT and LOG_LEVEL, then
    to "handover", "console" and "INFO".
    """
    service_name = service_name or os.getenv("SERVICE_NAME", "handover")
    log_format = log_format or os.getenv("LOG_FORMAT", "console")
    log_level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.getLevelNamesMapping().get(log_level, logging.INFO),
        force=True,
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(log_format)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service_name)

    get_logger(__name__).info("logging_initialized", log_format=log_format, log_level=log_level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
