"""
FastAPI application factory for EventMail.

Creates the app with lifespan, CORS, routers, and error handlers.

Usage:
    uvicorn src.app.main:app --reload --host 0.0.0.0 --port 8000
    DEMO_MODE=true uvicorn src.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.emails import (
    DuplicateEventId,
    DuplicateSlug,
    EventMailError,
    EventStore,
    MalformedOutput,
    MissingEvent,
    MissingRequiredField,
    MissingSelection,
    TemplateSyntaxError,
)

from .config import get_app_config
from .dependencies import get_event_store, set_event_store
from .fixtures.demo_data import seed_demo_events
from .routers import content_types, emails, events
from .schemas import ErrorResponse, HealthResponse

logger = logging.getLogger(__name__)

# Domain failures and the HTTP status they surface as
ERROR_STATUS: dict[type[EventMailError], tuple[int, str]] = {
    MissingRequiredField: (422, "Missing Required Field"),
    DuplicateSlug: (409, "Duplicate Slug"),
    DuplicateEventId: (409, "Duplicate Event Id"),
    MalformedOutput: (422, "Malformed Output"),
    MissingSelection: (400, "Missing Selection"),
    MissingEvent: (404, "Missing Event"),
    TemplateSyntaxError: (422, "Template Syntax Error"),
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the event store on startup, release it on shutdown."""
    config = get_app_config()

    store = EventStore(unique_slugs=config.unique_slugs)
    if config.demo_mode:
        seed_demo_events(store)
        logger.info("Running in demo mode, store seeded with fixture events")
    set_event_store(store)
    logger.info("Event store initialized")

    yield

    set_event_store(None)
    logger.info("Event store released")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    config = get_app_config()

    app = FastAPI(
        title="EventMail API",
        description="Marketing email generation for events",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    prefix = config.api_prefix
    app.include_router(events.router, prefix=prefix)
    app.include_router(content_types.router, prefix=prefix)
    app.include_router(emails.router, prefix=prefix)

    # Health check
    @app.get(f"{prefix}/health", response_model=HealthResponse, tags=["System"])
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="ok",
            demo_mode=config.demo_mode,
            event_count=len(get_event_store()),
        )

    # Exception handlers
    async def domain_error_handler(request: Request, exc: EventMailError) -> JSONResponse:
        status_code, error = ERROR_STATUS.get(type(exc), (400, "Bad Request"))
        logger.warning(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(error=error, detail=str(exc)).model_dump(),
        )

    for exc_class in ERROR_STATUS:
        app.add_exception_handler(exc_class, domain_error_handler)

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(
                error="Not Found",
                detail=getattr(exc, "detail", str(exc)),
            ).model_dump(),
        )

    @app.exception_handler(500)
    async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Internal server error: {exc}")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=str(exc) if config.debug else None,
            ).model_dump(),
        )

    return app


app = create_app()
