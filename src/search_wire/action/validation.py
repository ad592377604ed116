"""Helpers for collecting request validation problems as data."""

from __future__ import annotations

from typing import Protocol

from search_wire.errors import ActionRequestValidationError, SearchWireError


class Validatable(Protocol):
    """Protocol implemented by requests that can check themselves before dispatch."""

    def validate(self) -> ActionRequestValidationError | None:  # pragma: no cover - interface definition
        ...


def add_validation_error(
    error: SearchWireError | str,
    errors: ActionRequestValidationError | None,
) -> ActionRequestValidationError:
    """Append ``error`` to ``errors``, creating the collection on first use."""
    if errors is None:
        errors = ActionRequestValidationError()
    errors.add(error)
    return errors


def merge_validation(*results: ActionRequestValidationError | None) -> ActionRequestValidationError | None:
    """Combine several validation results, keeping their order.

    Returns None when none of the results carry an error.
    """
    merged: ActionRequestValidationError | None = None
    for result in results:
        if result is None or not len(result):
            continue
        if merged is None:
            merged = ActionRequestValidationError()
        merged.extend(result.errors)
    return merged


def ensure_valid(request: Validatable) -> None:
    """Raise the request's validation errors, if it has any."""
    errors = request.validate()
    if errors is not None and len(errors):
        raise errors
