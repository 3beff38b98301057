"""Request models for the log query API."""

from pydantic import Field

from .filters import CamelModel
from .suggestions import Suggestion

# ============ QUERY REQUESTS ============


class ParseRequest(CamelModel):
    """Body of POST /v1/query/parse."""

    query: str = Field(default="", description="Raw query text")
    strict: bool = Field(
        default=False,
        description="Reject structurally incomplete queries with 422 instead of flagging them",
    )


class SuggestRequest(CamelModel):
    """Body of POST /v1/query/suggest."""

    query: str = Field(default="", description="Raw query text")
    cursor_position: int | None = Field(
        default=None, description="Cursor offset into query (defaults to end of text)"
    )


class PreviewRequest(CamelModel):
    """Body of POST /v1/query/preview."""

    suggestion: Suggestion = Field(..., description="Suggestion being previewed")
    query: str = Field(default="", description="Current query text")
    cursor_position: int | None = Field(
        default=None, description="Cursor offset into query (defaults to end of text)"
    )


class ValidateRequest(CamelModel):
    """Body of POST /v1/query/validate."""

    query: str = Field(default="", description="Raw query text")


# ============ DOMAIN REQUESTS ============


class DomainsUpdateRequest(CamelModel):
    """Body of PUT /v1/domains. Omitted lists are left unchanged."""

    workflows: list[str] | None = Field(default=None, description="Workflow names")
    folders: list[str] | None = Field(default=None, description="Folder names")
