"""Filter builders that render into structured documents.

Any object with a ``render(builder, params)`` method satisfies the
``Renderable`` contract and can be nested in a bool filter. The classes here
share ``BaseFilterBuilder`` for the anonymous wrapping object and the optional
``_name``/``_cache``/``_cache_key`` metadata.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Self

from search_wire.xcontent.render import render_document, render_json


if TYPE_CHECKING:
    from search_wire.xcontent import DocumentBuilder, Params


class BaseFilterBuilder(ABC):
    """Writes ``{<filter body>}`` around the subclass's body."""

    def render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object()
        self.do_render(builder, params)
        builder.end_object()

    @abstractmethod
    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        """Write the named filter object into the already open wrapper."""

    def to_document(self, params: Params | None = None) -> Any:
        return render_document(self, params)

    def to_json(self, params: Params | None = None, *, pretty: bool | None = None) -> bytes:
        return render_json(self, params, pretty=pretty)

    def __str__(self) -> str:
        return self.to_json(pretty=True).decode("utf-8")


class CacheableFilterBuilder(BaseFilterBuilder):
    """Filter with optional name and cache hints, written after the body."""

    def __init__(self) -> None:
        self._filter_name: str | None = None
        self._cache: bool | None = None
        self._cache_key: str | None = None

    def filter_name(self, filter_name: str) -> Self:
        """Name reported for this filter in per-hit matched filters."""
        self._filter_name = filter_name
        return self

    def cache(self, cache: bool) -> Self:
        """Whether the filter result should be cached."""
        self._cache = cache
        return self

    def cache_key(self, cache_key: str) -> Self:
        self._cache_key = cache_key
        return self

    def render_metadata(self, builder: DocumentBuilder) -> None:
        """Write ``_name``, ``_cache``, ``_cache_key`` in that order, skipping unset values."""
        if self._filter_name is not None:
            builder.field("_name", self._filter_name)
        if self._cache is not None:
            builder.field("_cache", self._cache)
        if self._cache_key is not None:
            builder.field("_cache_key", self._cache_key)


class TermFilterBuilder(CacheableFilterBuilder):
    """Matches documents whose field contains the exact (not analyzed) term."""

    def __init__(self, name: str, value: Any) -> None:
        super().__init__()
        self.name = name
        self.value = value

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("term")
        builder.field(self.name, self.value)
        self.render_metadata(builder)
        builder.end_object()


class TermsFilterBuilder(CacheableFilterBuilder):
    """Matches documents whose field contains any of the terms."""

    def __init__(self, name: str, *values: Any) -> None:
        super().__init__()
        self.name = name
        self.values = list(values)

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("terms")
        builder.start_array(self.name)
        for value in self.values:
            builder.value(value)
        builder.end_array()
        self.render_metadata(builder)
        builder.end_object()


class RangeFilterBuilder(CacheableFilterBuilder):
    """Matches documents whose field falls within a range; both bounds inclusive by default."""

    def __init__(self, name: str) -> None:
        super().__init__()
        self.name = name
        self._from: Any = None
        self._to: Any = None
        self._include_lower = True
        self._include_upper = True

    def from_(self, value: Any) -> Self:
        self._from = value
        return self

    def to(self, value: Any) -> Self:
        self._to = value
        return self

    def gt(self, value: Any) -> Self:
        self._from = value
        self._include_lower = False
        return self

    def gte(self, value: Any) -> Self:
        self._from = value
        self._include_lower = True
        return self

    def lt(self, value: Any) -> Self:
        self._to = value
        self._include_upper = False
        return self

    def lte(self, value: Any) -> Self:
        self._to = value
        self._include_upper = True
        return self

    def include_lower(self, include_lower: bool) -> Self:
        self._include_lower = include_lower
        return self

    def include_upper(self, include_upper: bool) -> Self:
        self._include_upper = include_upper
        return self

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("range")
        builder.start_object(self.name)
        builder.field("from", self._from)
        builder.field("to", self._to)
        builder.field("include_lower", self._include_lower)
        builder.field("include_upper", self._include_upper)
        builder.end_object()
        self.render_metadata(builder)
        builder.end_object()


class ExistsFilterBuilder(BaseFilterBuilder):
    """Matches documents that have a value for the field."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._filter_name: str | None = None

    def filter_name(self, filter_name: str) -> Self:
        self._filter_name = filter_name
        return self

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("exists")
        builder.field("field", self.name)
        if self._filter_name is not None:
            builder.field("_name", self._filter_name)
        builder.end_object()


class MatchAllFilterBuilder(BaseFilterBuilder):
    """Matches every document."""

    def do_render(self, builder: DocumentBuilder, params: Params) -> None:
        builder.start_object("match_all")
        builder.end_object()
