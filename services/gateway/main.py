"""
Alnwick Community Center - FastAPI Gateway main application.

Entry point for the calendar API. Manages lifespan (logging, startup seed),
CORS, error mapping and routes.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from community.src.adapters.event_store import EventRepository, get_event_storage
from community.src.adapters.room_directory import RoomDirectory
from community.src.calendar.recurrence import seed_events
from community.src.calendar.seed_config import load_seed_config
from config.exceptions import EventNotFoundError, EventValidationError

from .auth import get_current_user
from .config import GatewaySettings, get_settings
from .dependencies import get_event_repository
from .logging_config import setup_logging
from .routes import admin_events, calendar, events, rooms
from .schemas import AuthUser, HealthResponse

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown."""
    settings: GatewaySettings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    logger.info("gateway_starting", environment=settings.environment)

    if not settings.admin_token:
        logger.warning("admin_token_not_configured_admin_routes_will_return_500")

    if settings.seed_on_startup:
        created = seed_events(
            app.state.event_repository, settings.seed_year, app.state.seed_config
        )
        logger.info("calendar_seeded", year=settings.seed_year, created=created)

    logger.info("gateway_started")

    yield

    logger.info("gateway_stopped")


async def _validation_error_handler(request: Request, exc: EventValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.message, "errors": exc.errors})


async def _not_found_handler(request: Request, exc: EventNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": "Event not found"})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = {
        ".".join(str(part) for part in err["loc"][1:]) or str(err["loc"][0]): err["msg"]
        for err in exc.errors()
    }
    return JSONResponse(status_code=400, content={"detail": "Invalid request", "errors": errors})


def create_app(
    settings: GatewaySettings | None = None,
    repository: EventRepository | None = None,
) -> FastAPI:
    """
    Factory to create the FastAPI application.

    Args:
        settings: Defaults to environment settings
        repository: Event Store to serve; a fresh empty one is built from
                    the settings when omitted (seeded at startup)
    """
    if settings is None:
        settings = get_settings()

    seed_config = load_seed_config(settings.seed_config_path or None)
    if repository is None:
        repository = EventRepository(
            storage=get_event_storage(settings.event_storage_provider),
            rooms=RoomDirectory(seed_config.rooms),
        )

    app = FastAPI(
        title="Alnwick Community Center API",
        description="Events calendar, room directory and admin event management",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.seed_config = seed_config
    app.state.event_repository = repository

    # CORS middleware (restrictive in production, permissive in dev)
    allow_methods = ["GET", "POST", "PUT", "DELETE"]
    allow_headers = ["Authorization", "Content-Type"]
    if settings.environment == "development":
        allow_methods = ["*"]
        allow_headers = ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=allow_methods,
        allow_headers=allow_headers,
    )

    app.add_exception_handler(EventValidationError, _validation_error_handler)
    app.add_exception_handler(EventNotFoundError, _not_found_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    # --- Routes ---

    @app.get("/api/health", response_model=HealthResponse, summary="Healthcheck")
    async def health_check(
        repository: EventRepository = Depends(get_event_repository),
    ) -> HealthResponse:
        return HealthResponse(
            status="healthy" if len(repository.rooms) else "degraded",
            timestamp=datetime.now(timezone.utc).isoformat(),
            events=repository.count(),
            rooms=len(repository.rooms),
        )

    @app.get("/api/me", response_model=AuthUser, summary="Current user")
    async def current_user(
        user: dict[str, str] = Depends(get_current_user),
    ) -> dict[str, str]:
        """Requires a valid bearer token in the Authorization header."""
        return user

    app.include_router(events.router)
    app.include_router(calendar.router)
    app.include_router(rooms.router)
    app.include_router(admin_events.router)

    return app


# Create default app instance for uvicorn
app = create_app()


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "services.gateway.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
