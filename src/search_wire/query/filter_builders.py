"""Factory functions for the available filter builders."""

from __future__ import annotations

from typing import Any

from search_wire.query.bool_filter import BoolFilterBuilder
from search_wire.query.filters import (
    ExistsFilterBuilder,
    MatchAllFilterBuilder,
    RangeFilterBuilder,
    TermFilterBuilder,
    TermsFilterBuilder,
)


def bool_filter() -> BoolFilterBuilder:
    """A filter matching boolean combinations of other filters."""
    return BoolFilterBuilder()


def term_filter(name: str, value: Any) -> TermFilterBuilder:
    """A filter for a field based on a term."""
    return TermFilterBuilder(name, value)


def terms_filter(name: str, *values: Any) -> TermsFilterBuilder:
    """A filter for a field based on several terms matching on any of them."""
    return TermsFilterBuilder(name, *values)


def range_filter(name: str) -> RangeFilterBuilder:
    """A filter restricting a field to a range of values."""
    return RangeFilterBuilder(name)


def exists_filter(name: str) -> ExistsFilterBuilder:
    """A filter matching documents where the field has a value."""
    return ExistsFilterBuilder(name)


def match_all_filter() -> MatchAllFilterBuilder:
    return MatchAllFilterBuilder()
