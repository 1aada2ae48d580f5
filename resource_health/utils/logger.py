"""structlog setup: coloured console for people, JSONL file for machines.

Every event carries the logger name, a UTC timestamp and, when emitted inside
an OpenTelemetry span, the trace and span ids so log lines can be joined to
traces.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog
from opentelemetry import trace

from resource_health.config import LOG_FILE, LOG_LEVEL, OTEL_SERVICE_NAME, VERBOSE_LOGGING

BoundLogger = structlog.stdlib.BoundLogger

# Third-party loggers that flood INFO (SQL echo, exporter retries)
_QUIET_LOGGERS = ("sqlalchemy.engine", "urllib3", "opentelemetry")

_configured = False


def _level_from_env(level_name: str) -> int:
    if level_name.isdigit():
        return int(level_name)
    return getattr(logging, level_name.upper(), logging.INFO)


def _add_trace_ids(_, __, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Attach trace_id/span_id of the current span, if one is recording."""
    ctx = trace.get_current_span().get_span_context()
    if ctx.is_valid:
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")
    return event_dict


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_trace_ids,
    ]


def _handler(handler: logging.Handler, renderer, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=_shared_processors(),
        )
    )
    return handler


def configure_logging(level: int | None = None, *, log_file: Path = LOG_FILE) -> None:
    """Install console + JSONL handlers on the root logger and configure structlog. Idempotent."""
    global _configured
    if _configured:
        return

    if level is None:
        level = logging.DEBUG if VERBOSE_LOGGING else _level_from_env(LOG_LEVEL)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(_handler(logging.StreamHandler(), structlog.dev.ConsoleRenderer(colors=True), level))
    root.addHandler(
        _handler(logging.FileHandler(log_file, encoding="utf-8"), structlog.processors.JSONRenderer(), level)
    )
    logging.captureWarnings(True)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str = "resource_health", **bindings: Any) -> BoundLogger:
    """Return a structured logger for name, bound with service plus any extra bindings."""
    configure_logging()
    return structlog.get_logger(name).bind(service=OTEL_SERVICE_NAME, **bindings)


def bind_context(**context: Any) -> None:
    """Bind context variables to be included with every log entry."""
    structlog.contextvars.bind_contextvars(**context)


def unbind_context(*keys: str) -> None:
    if keys:
        structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
