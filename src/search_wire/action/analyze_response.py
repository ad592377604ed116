"""Tokens produced by an analyze request."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Self


if TYPE_CHECKING:
    from search_wire.streams import StreamInput, StreamOutput
    from search_wire.xcontent import DocumentBuilder, Params


@dataclass(frozen=True)
class AnalyzeToken:
    """A single token emitted by the analysis chain."""

    term: str
    start_offset: int
    end_offset: int
    position: int
    type: str | None = None

    def write_to(self, out: StreamOutput) -> None:
        out.write_string(self.term)
        out.write_int(self.start_offset)
        out.write_int(self.end_offset)
        out.write_vint(self.position)
        out.write_optional_string(self.type)

    @classmethod
    def read_from(cls, stream: StreamInput) -> Self:
        term = stream.read_string()
        start_offset = stream.read_int()
        end_offset = stream.read_int()
        position = stream.read_vint()
        token_type = stream.read_optional_string()
        return cls(term, start_offset, end_offset, position, token_type)

    def render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object()
        builder.field("token", self.term)
        builder.field("start_offset", self.start_offset)
        builder.field("end_offset", self.end_offset)
        if self.type is not None:
            builder.field("type", self.type)
        builder.field("position", self.position)
        builder.end_object()


@dataclass
class AnalyzeResponse:
    """Ordered tokens returned for an ``AnalyzeRequest``."""

    tokens: list[AnalyzeToken] = field(default_factory=list)

    def __iter__(self) -> Iterator[AnalyzeToken]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def terms(self) -> list[str]:
        return [token.term for token in self.tokens]

    def write_to(self, out: StreamOutput) -> None:
        out.write_vint(len(self.tokens))
        for token in self.tokens:
            token.write_to(out)

    @classmethod
    def read_from(cls, stream: StreamInput) -> Self:
        size = stream.read_array_size()
        return cls(tokens=[AnalyzeToken.read_from(stream) for _ in range(size)])

    def render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object()
        builder.start_array("tokens")
        for token in self.tokens:
            token.render(builder, params)
        builder.end_array()
        builder.end_object()
