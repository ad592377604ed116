"""Administrative request and response messages."""

from search_wire.action.analyze import AnalyzeRequest
from search_wire.action.analyze_response import AnalyzeResponse, AnalyzeToken
from search_wire.action.base import CustomOperationOptions
from search_wire.action.transport import deserialize, serialize
from search_wire.action.validation import add_validation_error, ensure_valid, merge_validation


__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnalyzeToken",
    "CustomOperationOptions",
    "add_validation_error",
    "deserialize",
    "ensure_valid",
    "merge_validation",
    "serialize",
]
