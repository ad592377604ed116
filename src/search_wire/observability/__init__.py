"""Observability module for tracing, metrics, and structured logging."""

from search_wire.observability.context import (
    get_trace_context,
    reset_trace_context,
    set_trace_context,
    trace_context,
    with_otel_span,
)
from search_wire.observability.logging import (
    JsonFormatter,
    configure_logging,
    configure_logging_from_settings,
)
from search_wire.observability.metrics import (
    CODEC_LATENCY,
    CODEC_OPERATIONS,
    RENDER_COUNT,
    get_metrics,
    get_metrics_content_type,
    init_metrics,
    track_latency,
)
from search_wire.observability.tracing import create_span, get_tracer, init_tracing


__all__ = [
    "CODEC_LATENCY",
    "CODEC_OPERATIONS",
    "RENDER_COUNT",
    "JsonFormatter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_span",
    "get_metrics",
    "get_metrics_content_type",
    "get_trace_context",
    "get_tracer",
    "init_metrics",
    "init_tracing",
    "reset_trace_context",
    "set_trace_context",
    "trace_context",
    "track_latency",
    "with_otel_span",
]
