"""Encode and decode wire messages with tracing, metrics, and logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from search_wire.config import Settings, get_settings
from search_wire.errors import MalformedStream
from search_wire.observability.metrics import CODEC_LATENCY, CODEC_OPERATIONS, track_latency
from search_wire.observability.tracing import create_span
from search_wire.streams import StreamInput, StreamOutput


if TYPE_CHECKING:
    from search_wire.streams import Streamable


logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Streamable")


def serialize(message: Streamable) -> bytes:
    """Encode ``message`` into a standalone byte string."""
    name = type(message).__name__
    out = StreamOutput()

    with create_span("wire.encode", attributes={"message": name}), track_latency(CODEC_LATENCY, operation="encode"):
        try:
            message.write_to(out)
        except Exception:
            CODEC_OPERATIONS.labels(message=name, operation="encode", status="error").inc()
            raise

    data = out.getvalue()
    CODEC_OPERATIONS.labels(message=name, operation="encode", status="ok").inc()
    logger.debug("Encoded %s into %d bytes", name, len(data))
    return data


def deserialize(factory: type[T], data: bytes, *, settings: Settings | None = None) -> T:
    """Decode a message that must occupy all of ``data``.

    Raises:
        MalformedStream: The bytes end early, are corrupt, or carry trailing data.
    """
    active_settings = settings or get_settings()
    name = factory.__name__
    stream = StreamInput(
        data,
        max_string_bytes=active_settings.max_string_bytes,
        max_array_size=active_settings.max_array_size,
    )

    with create_span("wire.decode", attributes={"message": name, "bytes": len(data)}), track_latency(
        CODEC_LATENCY, operation="decode"
    ):
        try:
            message = factory.read_from(stream)
            remaining = stream.remaining()
            if remaining:
                raise MalformedStream(f"{remaining} trailing byte(s) after {name}")
        except MalformedStream as exc:
            CODEC_OPERATIONS.labels(message=name, operation="decode", status="error").inc()
            logger.warning("Failed to decode %s: %s", name, exc)
            raise

    CODEC_OPERATIONS.labels(message=name, operation="decode", status="ok").inc()
    logger.debug("Decoded %s from %d bytes", name, len(data))
    return message
