"""Pydantic models for the log query service.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from logquery.models.enums import ContextType
    from logquery.models.filters import ParsedQuery
"""

# ============ ENUMS ============
from .enums import (
    ContextType,
    FieldKind,
    FilterOperator,
    SuggestionGroupType,
)

# ============ FILTER MODELS ============
from .filters import (
    CamelModel,
    FilterDefinition,
    FilterOption,
    ParsedFilter,
    ParsedQuery,
)

# ============ AUTOCOMPLETE MODELS ============
from .suggestions import (
    QueryContext,
    Suggestion,
    SuggestionGroup,
)

# ============ REQUEST MODELS ============
from .requests import (
    DomainsUpdateRequest,
    ParseRequest,
    PreviewRequest,
    SuggestRequest,
    ValidateRequest,
)

# ============ RESPONSE MODELS ============
from .responses import (
    DomainsResponse,
    HealthResponse,
    ParseResponse,
    PreviewResponse,
    SuggestResponse,
    ValidateResponse,
)

__all__ = [
    # Enums
    "ContextType",
    "FieldKind",
    "FilterOperator",
    "SuggestionGroupType",
    # Filter models
    "CamelModel",
    "FilterDefinition",
    "FilterOption",
    "ParsedFilter",
    "ParsedQuery",
    # Autocomplete models
    "QueryContext",
    "Suggestion",
    "SuggestionGroup",
    # Request models
    "DomainsUpdateRequest",
    "ParseRequest",
    "PreviewRequest",
    "SuggestRequest",
    "ValidateRequest",
    # Response models
    "DomainsResponse",
    "HealthResponse",
    "ParseResponse",
    "PreviewResponse",
    "SuggestResponse",
    "ValidateResponse",
]
