"""Utility modules."""

from resource_health.utils.logger import bind_context, clear_context, get_logger, unbind_context
from resource_health.utils.tracing import get_tracer, init_tracing, shutdown_tracing

__all__ = [
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "init_tracing",
    "get_tracer",
    "shutdown_tracing",
]
