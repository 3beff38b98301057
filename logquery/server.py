"""FastAPI server for the log search query language."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import check_query_length, get_engine, require_admin_key, sanitize_error_message
from .config import configure_logging, settings
from .engine import (
    SearchSuggestions,
    analyze_context,
    generate_preview,
    parse_query,
    query_to_api_params,
    validate_query,
)
from .engine.core import FILTER_DEFINITIONS
from .middleware import SecurityHeadersMiddleware
from .models import (
    DomainsResponse,
    DomainsUpdateRequest,
    FilterDefinition,
    HealthResponse,
    ParseRequest,
    ParseResponse,
    PreviewRequest,
    PreviewResponse,
    SuggestRequest,
    SuggestResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

Engine = Annotated[SearchSuggestions, Depends(get_engine)]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    configure_logging()
    logger.info(f"Starting log query server v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "SECURITY WARNING: CORS is configured to allow all origins ('*'). "
            "Set LOGQUERY_CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    app.state.suggestions = SearchSuggestions(
        workflows=settings.initial_workflows_list,
        folders=settings.initial_folders_list,
    )
    yield


app = FastAPI(
    title="Log Query Server",
    description="Parsing and autocomplete for the log search query language",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "X-API-Key", "X-Request-Id"],
)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.detail},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages (logged by the sanitizer)."""
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": sanitize_error_message(exc)},
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Log Query Server",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


# ============ QUERY ENDPOINTS ============


@app.post("/v1/query/parse", response_model=ParseResponse, tags=["Query"])
async def parse_endpoint(request: ParseRequest) -> ParseResponse:
    """
    Parse a query and map it to backend params.

    With strict=true a structurally incomplete query (dangling key,
    unterminated quote) is rejected with 422.
    """
    check_query_length(request.query)

    valid = validate_query(request.query)
    if request.strict and not valid:
        raise HTTPException(
            status_code=422,
            detail="Incomplete query: finish the last filter or close the open quote",
        )

    parsed = parse_query(request.query)
    return ParseResponse(parsed=parsed, params=query_to_api_params(parsed), valid=valid)


@app.post("/v1/query/suggest", response_model=SuggestResponse, tags=["Query"])
async def suggest_endpoint(request: SuggestRequest, engine: Engine) -> SuggestResponse:
    """Return the cursor context and the suggestions for it."""
    check_query_length(request.query)
    return SuggestResponse(
        context=analyze_context(request.query, request.cursor_position),
        group=engine.get_suggestions(request.query, request.cursor_position),
    )


@app.post("/v1/query/preview", response_model=PreviewResponse, tags=["Query"])
async def preview_endpoint(request: PreviewRequest) -> PreviewResponse:
    """Return the query text that results from accepting a suggestion."""
    check_query_length(request.query)
    return PreviewResponse(
        preview=generate_preview(request.suggestion, request.query, request.cursor_position)
    )


@app.post("/v1/query/validate", response_model=ValidateResponse, tags=["Query"])
async def validate_endpoint(request: ValidateRequest) -> ValidateResponse:
    check_query_length(request.query)
    return ValidateResponse(valid=validate_query(request.query))


# ============ CATALOG & DOMAIN ENDPOINTS ============


@app.get("/v1/filters", response_model=list[FilterDefinition], tags=["Catalog"])
async def list_filters() -> list[FilterDefinition]:
    """List the filter fields offered by autocomplete."""
    return list(FILTER_DEFINITIONS)


@app.get("/v1/domains", response_model=DomainsResponse, tags=["Catalog"])
async def get_domains(engine: Engine) -> DomainsResponse:
    return DomainsResponse(workflows=list(engine.workflows), folders=list(engine.folders))


@app.put(
    "/v1/domains",
    response_model=DomainsResponse,
    dependencies=[Depends(require_admin_key)],
    tags=["Catalog"],
)
async def update_domains(request: DomainsUpdateRequest, engine: Engine) -> DomainsResponse:
    """Replace the workflow and/or folder names offered by autocomplete."""
    engine.update_available_data(workflows=request.workflows, folders=request.folders)
    return DomainsResponse(workflows=list(engine.workflows), folders=list(engine.folders))


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "logquery.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
