"""FastAPI application for the real-estate listings API."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response

from .core.config import Settings, get_settings
from .core.errors import register_error_handlers
from .core.logging import RequestLogMiddleware, configure_logging
from .db.session import Database
from .routers import admin, auth, blog, leads, projects, properties, settings as settings_router, team
from .services.auth import AdminGateMiddleware, AuthGate

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the application.

    Without arguments the settings are read from the environment and a database
    is opened on startup; tests pass both in so no environment is needed.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_database = getattr(app.state, "database", None) is None
        if owns_database:
            app.state.database = Database(settings.database_async_url, echo=settings.database_echo)
        logger.info("Starting API in %s mode", settings.app_env)
        try:
            yield
        finally:
            if owns_database:
                await app.state.database.dispose()
                app.state.database = None

    app = FastAPI(title="Real Estate API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.auth_gate = AuthGate(settings)
    app.state.database = database

    app.add_middleware(AdminGateMiddleware, path_prefix=f"{API_PREFIX}/admin")
    if settings.cors_allow_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allow_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(RequestLogMiddleware)
    register_error_handlers(app)

    for module in (properties, projects, team, blog, leads, settings_router, auth, admin):
        app.include_router(module.router, prefix=API_PREFIX)

    @app.get("/api/health", tags=["meta"])
    async def health(request: Request) -> dict[str, str]:
        """Liveness check that also reports whether the database answers."""

        connected = await request.app.state.database.ping()
        return {
            "status": "ok",
            "database": "connected" if connected else "disconnected",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.head("/api/health", tags=["meta"])
    async def health_head() -> Response:
        """Allow HEAD for uptime monitors that only need the status code."""

        return Response(status_code=200)

    @app.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
    async def robots() -> PlainTextResponse:
        return PlainTextResponse("User-agent: *\nDisallow: /api/admin")

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""

    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
