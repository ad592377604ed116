"""Binary stream primitives used by request codecs."""

from search_wire.streams.stream import (
    DEFAULT_MAX_ARRAY_SIZE,
    DEFAULT_MAX_STRING_BYTES,
    Streamable,
    StreamInput,
    StreamOutput,
)


__all__ = [
    "DEFAULT_MAX_ARRAY_SIZE",
    "DEFAULT_MAX_STRING_BYTES",
    "StreamInput",
    "StreamOutput",
    "Streamable",
]
