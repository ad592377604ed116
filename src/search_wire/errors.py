"""Error taxonomy for request codecs, validation, and document rendering.

- MissingField: a structurally required value is absent (collected by validation)
- ActionRequestValidationError: ordered collection of validation problems
- MalformedStream: binary decode could not complete
- RenderFailure: the document builder was driven into an invalid state
"""

from __future__ import annotations

from collections.abc import Iterable


class SearchWireError(Exception):
    """Base class for every error raised by search_wire."""


class MissingField(SearchWireError):
    """A required field has no value."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is missing")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingField):
            return NotImplemented
        return self.field == other.field

    def __hash__(self) -> int:
        return hash((MissingField, self.field))

    def __repr__(self) -> str:
        return f"MissingField({self.field!r})"


class ActionRequestValidationError(SearchWireError):
    """Collected validation problems for a single request.

    Returned as data by ``validate()`` so every problem can be reported at
    once; only raised by the submit-side helper ``ensure_valid``.
    """

    def __init__(self, errors: Iterable[SearchWireError | str] = ()) -> None:
        self._errors: list[SearchWireError | str] = list(errors)
        super().__init__()

    def add(self, error: SearchWireError | str) -> None:
        self._errors.append(error)

    def extend(self, errors: Iterable[SearchWireError | str]) -> None:
        self._errors.extend(errors)

    @property
    def errors(self) -> tuple[SearchWireError | str, ...]:
        return tuple(self._errors)

    def messages(self) -> list[str]:
        return [str(error) for error in self._errors]

    def __len__(self) -> int:
        return len(self._errors)

    def __str__(self) -> str:
        parts = "".join(f"{idx}: {message};" for idx, message in enumerate(self.messages(), start=1))
        return f"Validation Failed: {parts}"


class MalformedStream(SearchWireError):
    """Binary decode failed: short read, corrupt length prefix, or bad bytes."""


class RenderFailure(SearchWireError):
    """The structured document could not be produced."""
