"""Filter catalog and parsed query models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import FilterOperator


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys for the host UI."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============ CATALOG ============


class FilterOption(CamelModel):
    """One enumerated legal value of a catalog field."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Value inserted into the query")
    label: str = Field(..., description="Human-readable label")
    description: str | None = Field(default=None, description="Optional help text")


class FilterDefinition(CamelModel):
    """A filterable field offered by autocomplete."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Field name used before the colon")
    label: str = Field(..., description="Human-readable field label")
    description: str = Field(..., description="What the field filters on")
    options: tuple[FilterOption, ...] = Field(
        default_factory=tuple, description="Enumerated legal values"
    )


# ============ PARSED QUERY ============


class ParsedFilter(CamelModel):
    """A single recognized `field:value` filter."""

    field: str = Field(..., description="Filter field name")
    operator: FilterOperator = Field(default=FilterOperator.EQ, description="Comparison operator")
    value: str | float | bool = Field(..., description="Coerced filter value")
    original_value: str = Field(..., description="Value text as typed, operator included")


class ParsedQuery(CamelModel):
    """Structured result of parsing a query string."""

    filters: list[ParsedFilter] = Field(default_factory=list, description="Recognized filters")
    text_search: str = Field(default="", description="Remaining free text")
