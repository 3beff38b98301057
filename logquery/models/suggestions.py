"""Autocomplete models: cursor context and suggestion groups."""

from pydantic import Field

from .enums import ContextType, SuggestionGroupType
from .filters import CamelModel


class QueryContext(CamelModel):
    """Inferred context at the cursor. Derived fresh on every call."""

    type: ContextType = Field(..., description="Syntactic context")
    filter_key: str | None = Field(default=None, description="Key being completed")
    partial_input: str | None = Field(default=None, description="Text typed so far")
    start_position: int | None = Field(default=None, description="Span start (inclusive)")
    end_position: int | None = Field(default=None, description="Span end (exclusive)")


class Suggestion(CamelModel):
    """A single completion candidate."""

    id: str = Field(..., description="Stable identifier for UI keys")
    value: str = Field(..., description="Text inserted when accepted")
    label: str = Field(..., description="Display label")
    description: str | None = Field(default=None, description="Optional help text")
    category: str = Field(..., description="'filters' for keys, the field key for values")


class SuggestionGroup(CamelModel):
    """Ordered list of suggestions of a single kind."""

    type: SuggestionGroupType = Field(..., description="Keys or values")
    filter_key: str | None = Field(default=None, description="Field the values belong to")
    suggestions: list[Suggestion] = Field(default_factory=list, description="Candidates")
