"""Response models for the log query API."""

from datetime import datetime

from pydantic import Field

from .filters import CamelModel, ParsedQuery
from .suggestions import QueryContext, SuggestionGroup


class HealthResponse(CamelModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Service version")
    timestamp: datetime = Field(..., description="Server time")


class ParseResponse(CamelModel):
    """Parsed query plus the backend params it maps to."""

    parsed: ParsedQuery = Field(..., description="Filters and free text")
    params: dict[str, str] = Field(default_factory=dict, description="Backend query params")
    valid: bool = Field(..., description="Whether the query is structurally complete")


class SuggestResponse(CamelModel):
    """Cursor context and the suggestions it produced."""

    context: QueryContext = Field(..., description="Inferred cursor context")
    group: SuggestionGroup | None = Field(default=None, description="Suggestions, if any")


class PreviewResponse(CamelModel):
    preview: str = Field(..., description="Query text after accepting the suggestion")


class ValidateResponse(CamelModel):
    valid: bool = Field(..., description="Whether the query is structurally complete")


class DomainsResponse(CamelModel):
    """Current dynamic domains held by the engine."""

    workflows: list[str] = Field(default_factory=list, description="Workflow names")
    folders: list[str] = Field(default_factory=list, description="Folder names")
