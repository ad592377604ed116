"""Filter builders and the boolean filter combinator."""

from search_wire.query.bool_filter import BoolFilterBuilder, Clause, Occur
from search_wire.query.filter_builders import (
    bool_filter,
    exists_filter,
    match_all_filter,
    range_filter,
    term_filter,
    terms_filter,
)
from search_wire.query.filters import (
    BaseFilterBuilder,
    CacheableFilterBuilder,
    ExistsFilterBuilder,
    MatchAllFilterBuilder,
    RangeFilterBuilder,
    TermFilterBuilder,
    TermsFilterBuilder,
)


__all__ = [
    "BaseFilterBuilder",
    "BoolFilterBuilder",
    "CacheableFilterBuilder",
    "Clause",
    "ExistsFilterBuilder",
    "MatchAllFilterBuilder",
    "Occur",
    "RangeFilterBuilder",
    "TermFilterBuilder",
    "TermsFilterBuilder",
    "bool_filter",
    "exists_filter",
    "match_all_filter",
    "range_filter",
    "term_filter",
    "terms_filter",
]
