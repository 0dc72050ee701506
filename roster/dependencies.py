"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import Request

from roster.config import Settings
from roster.db import InMemoryTeamStore, MongoTeamStore, TeamStore

logger = logging.getLogger(__name__)


def build_team_store(settings: Settings) -> TeamStore:
    """
    Pick the team store implementation for the given settings.
    """
    if settings.use_in_memory_backends or not settings.mongodb_url:
        if not settings.use_in_memory_backends:
            logger.warning("MONGODB_URL is not set, falling back to in-memory store")
        return InMemoryTeamStore()
    return MongoTeamStore(
        settings.mongodb_url,
        database=settings.mongodb_database,
        collection=settings.mongodb_collection,
        timeout_ms=settings.mongodb_timeout_ms,
    )


def get_team_store(request: Request) -> TeamStore:
    """Return the store opened for this app at startup."""
    return request.app.state.team_store
