"""Observability helpers: structured logging, trace context and tracing spans."""

from fuzzy_lookup.observability.context import get_trace_context, set_trace_context, trace_context
from fuzzy_lookup.observability.logging import JsonFormatter, configure_logging, configure_logging_from_settings
from fuzzy_lookup.observability.tracing import create_span, get_tracer, init_tracing, reset_tracing


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_trace_context",
    "get_tracer",
    "init_tracing",
    "reset_tracing",
    "set_trace_context",
    "trace_context",
]
