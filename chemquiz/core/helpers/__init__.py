from .filter_helper import apply_search, compile_search, term_predicate
from .search import (
    NO_SEARCH,
    Exact,
    IsNotNull,
    IsNull,
    NoSearch,
    NullableSearch,
    NullableSearchTerm,
    Partial,
    Search,
    SearchCriteria,
    SearchPayload,
    SearchTerm,
    parse_nullable_search,
    parse_search,
)

__all__ = [
    "NO_SEARCH",
    "Exact",
    "IsNotNull",
    "IsNull",
    "NoSearch",
    "NullableSearch",
    "NullableSearchTerm",
    "Partial",
    "Search",
    "SearchCriteria",
    "SearchPayload",
    "SearchTerm",
    "apply_search",
    "compile_search",
    "parse_nullable_search",
    "parse_search",
    "term_predicate",
]
