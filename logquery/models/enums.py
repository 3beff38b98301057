"""Enumeration types for the log query service."""

from enum import StrEnum


class FilterOperator(StrEnum):
    """Comparison operators accepted in front of a filter value."""

    EQ = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    NEQ = "!="


class FieldKind(StrEnum):
    """How a filter field's raw value is coerced."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"  # Named ranges (today, yesterday, ...)


class ContextType(StrEnum):
    """Syntactic role of the text immediately before the cursor."""

    INITIAL = "initial"  # Ready for a new token
    FILTER_KEY_PARTIAL = "filter-key-partial"  # Typing a bare word
    FILTER_VALUE_CONTEXT = "filter-value-context"  # Typing after key:
    TEXT_SEARCH = "text-search"  # Free text, nothing to offer


class SuggestionGroupType(StrEnum):
    """Kind of suggestion list returned to the host UI."""

    FILTER_KEYS = "filter-keys"
    FILTER_VALUES = "filter-values"
