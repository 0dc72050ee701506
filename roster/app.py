"""
FastAPI application entry point for the roster service.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from roster.config import Settings, get_settings
from roster.db import TeamStore
from roster.dependencies import build_team_store
from roster.errors import register_exception_handlers
from roster.routes import health_router, router


def create_app(
    settings: Settings | None = None, team_store: TeamStore | None = None
) -> FastAPI:
    settings = settings or get_settings()
    store = team_store or build_team_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(
        title="Team Roster API",
        version="1.0.0",
        docs_url="/",
        lifespan=lifespan,
    )
    app.state.team_store = store
    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)
    app.include_router(health_router)
    return app
