"""Boolean combination of filters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Self

from search_wire.query.filters import CacheableFilterBuilder
from search_wire.xcontent.render import Renderable


if TYPE_CHECKING:
    from search_wire.xcontent import DocumentBuilder, Params


class Occur(str, Enum):
    """How a clause takes part in matching."""

    MUST = "must"
    MUST_NOT = "must_not"
    SHOULD = "should"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Clause:
    """A filter tagged with its occurrence."""

    filter: Renderable
    occur: Occur


class BoolFilterBuilder(CacheableFilterBuilder):
    """A filter matching documents by boolean combinations of other filters.

    Clauses render in the order they were added, one ``must``/``must_not``/
    ``should`` entry per clause, so the same key can repeat inside the
    ``bool`` object and clauses of different kinds stay interleaved. Adding
    the same filter twice renders it twice. Rendering does not change the
    builder and can be repeated.

    Example:
        BoolFilterBuilder().must(term_filter("status", "active")).must_not(exists_filter("deleted_at"))
    """

    def __init__(self) -> None:
        super().__init__()
        self._clauses: list[Clause] = []

    def add(self, occur: Occur, *filters: Renderable) -> Self:
        for filter_builder in filters:
            if not isinstance(filter_builder, Renderable):
                raise TypeError(f"{type(filter_builder).__name__} cannot render into a document")
            self._clauses.append(Clause(filter_builder, occur))
        return self

    def must(self, *filters: Renderable) -> Self:
        """Add filters that must match."""
        return self.add(Occur.MUST, *filters)

    def must_not(self, *filters: Renderable) -> Self:
        """Add filters that must not match."""
        return self.add(Occur.MUST_NOT, *filters)

    def should(self, *filters: Renderable) -> Self:
        """Add filters that should match.

        With no ``must`` clauses, at least one ``should`` clause has to match
        a document for the bool filter to match it.
        """
        return self.add(Occur.SHOULD, *filters)

    @property
    def clauses(self) -> tuple[Clause, ...]:
        return tuple(self._clauses)

    def has_clauses(self) -> bool:
        return bool(self._clauses)

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("bool")
        for clause in self._clauses:
            builder.field(clause.occur.label)
            clause.filter.render(builder, params)
        self.render_metadata(builder)
        builder.end_object()
