"""Request to analyze text, optionally against a specific index."""

from __future__ import annotations

from dataclasses import dataclass, field as dataclass_field
from typing import TYPE_CHECKING, Self

from search_wire.action.base import CustomOperationOptions
from search_wire.action.validation import add_validation_error, merge_validation
from search_wire.errors import ActionRequestValidationError, MissingField


if TYPE_CHECKING:
    from collections.abc import Sequence

    from search_wire.streams import StreamInput, StreamOutput


@dataclass
class AnalyzeRequest:
    """A request to analyze text with a named analyzer, or a tokenizer plus token filters.

    Built with fluent setters that return the request itself and perform no
    validation; call ``validate()`` before dispatch. Instances are not
    synchronized: build on one thread, then share read-only.

    Wire layout, after the embedded options:
    optional index, text, optional analyzer, optional tokenizer,
    vint count + token filter strings, optional field.

    A ``None`` token filter list is written as an empty list, so it decodes as
    ``[]`` rather than ``None``.

    Attributes:
        text: Text to analyze (required)
        index: Index whose analysis settings apply; None means no specific index
        analyzer: Named analyzer
        tokenizer: Named tokenizer, used with ``token_filters`` instead of an analyzer
        token_filters: Named token filters, applied in order
        field: Field whose mapped analyzer should be used
        options: Embedded common request options
    """

    text: str | None = None
    index: str | None = None
    analyzer: str | None = None
    tokenizer: str | None = None
    token_filters: list[str] | None = None
    field: str | None = None
    options: CustomOperationOptions = dataclass_field(default_factory=CustomOperationOptions)

    @classmethod
    def for_index(cls, index: str | None, text: str) -> Self:
        """Create a request for ``text`` analyzed against ``index``."""
        return cls(text=text, index=index)

    def set_index(self, index: str | None) -> Self:
        self.index = index
        return self

    def set_analyzer(self, analyzer: str | None) -> Self:
        self.analyzer = analyzer
        return self

    def set_tokenizer(self, tokenizer: str | None) -> Self:
        self.tokenizer = tokenizer
        return self

    def set_token_filters(self, *token_filters: str | Sequence[str]) -> Self:
        """Set the token filters, given either as arguments or as one list/tuple."""
        if len(token_filters) == 1 and isinstance(token_filters[0], (list, tuple)):
            token_filters = tuple(token_filters[0])
        for name in token_filters:
            if not isinstance(name, str):
                raise TypeError(f"token filter names must be strings, got {type(name).__name__}")
        self.token_filters = list(token_filters)
        return self

    def set_field(self, field: str | None) -> Self:
        self.field = field
        return self

    def set_threaded_operation(self, threaded_operation: bool) -> Self:
        self.options.threaded_operation = threaded_operation
        return self

    def set_prefer_local(self, prefer_local: bool) -> Self:
        self.options.prefer_local = prefer_local
        return self

    def validate(self) -> ActionRequestValidationError | None:
        """Return every validation problem, or None when the request can be sent.

        The embedded options' own result is merged first; this layer only
        requires ``text``.
        """
        errors = merge_validation(self.options.validate())
        if self.text is None:
            errors = add_validation_error(MissingField("text"), errors)
        return errors

    def write_to(self, out: StreamOutput) -> None:
        if self.text is None:
            raise MissingField("text")
        self.options.write_to(out)
        out.write_optional_string(self.index)
        out.write_string(self.text)
        out.write_optional_string(self.analyzer)
        out.write_optional_string(self.tokenizer)
        out.write_string_list(self.token_filters)
        out.write_optional_string(self.field)

    @classmethod
    def read_from(cls, stream: StreamInput) -> Self:
        options = CustomOperationOptions.read_from(stream)
        index = stream.read_optional_string()
        text = stream.read_string()
        analyzer = stream.read_optional_string()
        tokenizer = stream.read_optional_string()
        token_filters = stream.read_string_list()
        field = stream.read_optional_string()
        return cls(
            text=text,
            index=index,
            analyzer=analyzer,
            tokenizer=tokenizer,
            token_filters=token_filters,
            field=field,
            options=options,
        )
