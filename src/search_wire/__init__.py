"""
Request modeling and query composition for a search cluster's admin API.

This package provides:
- action: the analyze request/response messages and their wire codec
- query: filter builders, including the boolean filter combinator
- streams: binary stream primitives for the wire format
- xcontent: structured document building and JSON output
- observability: structured logging, tracing, and metrics
"""

from search_wire.action import AnalyzeRequest, AnalyzeResponse, AnalyzeToken, deserialize, serialize
from search_wire.errors import (
    ActionRequestValidationError,
    MalformedStream,
    MissingField,
    RenderFailure,
    SearchWireError,
)
from search_wire.query import BoolFilterBuilder, Occur


__all__ = [
    "ActionRequestValidationError",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnalyzeToken",
    "BoolFilterBuilder",
    "MalformedStream",
    "MissingField",
    "Occur",
    "RenderFailure",
    "SearchWireError",
    "deserialize",
    "serialize",
]
