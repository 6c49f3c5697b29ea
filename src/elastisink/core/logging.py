# src/elastisink/core/logging.py
"""Logging setup for processes that host the connector configuration.

ElasticsearchSinkConfig logs its resolved values, unknown keys and ignored TLS
settings through structlog. stdlib records from the HTTP client stack are
rendered through the same ProcessorFormatter chain, so one stream carries both.
Nothing under elastisink.core or elastisink.connector calls configure_logging();
the host or the CLI does.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import ProcessorFormatter

# HTTP client libraries used by the connection layer are very chatty at
# DEBUG (one line per request/connection). Keep them at WARNING even when
# elastisink itself runs in DEBUG mode.
_NOISY_LOGGERS: tuple[str, ...] = (
    "elasticsearch",
    "elastic_transport",
    "elastic_transport.transport",
    "urllib3",
    "urllib3.connectionpool",
    "httpx",
    "httpcore",
)


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop the _record and _from_structlog keys before rendering."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
) -> None:
    """Route structlog and stdlib records to one stderr handler.

    Args:
        json_output: Render JSON lines instead of the coloured console format
        level: Root level name, e.g. "INFO" or "DEBUG"
    """
    log_level = getattr(logging, level.upper())

    # Shared processors applied to ALL log records (structlog and stdlib)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=[*shared_processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Tests reconfigure logging; cached loggers would keep the old setup
        cache_logger_on_first_use=False,
    )

    # Logs go to stderr so `elastisink docs` / `validate --format json` keep stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)

    # Never make noisy loggers less restrictive than the root level
    noisy_level = max(log_level, logging.WARNING)
    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return the structlog logger for ``name``."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
