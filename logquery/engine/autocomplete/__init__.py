"""Autocomplete for the log search bar.

This package provides the interactive side of the query language:
- Cursor context classification
- Suggestion groups (filter keys and values)
- Text-splice previews
- Structural validation before submission

Usage:
    from logquery.engine.autocomplete import SearchSuggestions, generate_preview

    engine = SearchSuggestions(workflows=["Daily report"], folders=["Ops"])
    group = engine.get_suggestions("lev", 3)
"""

from .context import analyze_context, clamp_cursor, is_value_complete
from .preview import generate_preview
from .suggestions import KEY_CATEGORY, SearchSuggestions
from .validation import validate_query

__all__ = [
    "analyze_context",
    "clamp_cursor",
    "is_value_complete",
    "generate_preview",
    "KEY_CATEGORY",
    "SearchSuggestions",
    "validate_query",
]
