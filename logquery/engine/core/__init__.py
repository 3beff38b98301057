"""Engine core module.

This module contains the query language core:
- Filter catalog
- Per-field coercion and mapping strategies
- Query parsing
- Backend params mapping
"""

from .api_params import query_to_api_params
from .catalog import (
    DYNAMIC_KEYS,
    FILTER_DEFINITIONS,
    ID_KEYS,
    MAX_DYNAMIC_SUGGESTIONS,
    get_filter_definition,
    is_catalog_field,
    is_option_value,
)
from .fields import (
    FIELD_STRATEGIES,
    FieldStrategy,
    coerce_value,
    extract_operator,
    format_number,
    get_field_strategy,
    strip_quotes,
)
from .parser import parse_filter, parse_query

__all__ = [
    # Catalog
    "FILTER_DEFINITIONS",
    "DYNAMIC_KEYS",
    "ID_KEYS",
    "MAX_DYNAMIC_SUGGESTIONS",
    "get_filter_definition",
    "is_catalog_field",
    "is_option_value",
    # Field strategies
    "FIELD_STRATEGIES",
    "FieldStrategy",
    "coerce_value",
    "extract_operator",
    "format_number",
    "get_field_strategy",
    "strip_quotes",
    # Parsing
    "parse_filter",
    "parse_query",
    # Mapping
    "query_to_api_params",
]
