"""Query language engine: parsing, mapping and autocomplete."""

from .autocomplete import (
    SearchSuggestions,
    analyze_context,
    generate_preview,
    validate_query,
)
from .core import parse_filter, parse_query, query_to_api_params

__all__ = [
    "SearchSuggestions",
    "analyze_context",
    "generate_preview",
    "parse_filter",
    "parse_query",
    "query_to_api_params",
    "validate_query",
]
