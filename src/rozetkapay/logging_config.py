"""Structured logging setup for applications embedding the client.

The library itself only emits structlog events (module loggers created
with structlog.get_logger(__name__)); it never configures logging on
import. Applications without their own structlog setup can call
configure_logging() once at startup.

Request and response bodies are never logged, only method, path, status,
attempt numbers and the classified error message.
"""

import logging
import sys
from typing import Optional

import structlog
from structlog.types import EventDict, WrappedLogger

from rozetkapay.config import Settings


def add_sdk_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the SDK name."""
    event_dict.setdefault("sdk", "rozetkapay")
    return event_dict


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    stream=None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: "production" renders JSON lines, anything else a
            colored console format
        stream: Output stream, stdout by default
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_sdk_context,
    ]

    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream is None)

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level_int)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level_int)

    # httpx logs full request URLs (including query strings) at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )


def configure_logging_from_settings(settings: Optional[Settings] = None) -> None:
    """configure_logging() driven by ROZETKAPAY_LOG_LEVEL / ROZETKAPAY_ENVIRONMENT."""
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT)
