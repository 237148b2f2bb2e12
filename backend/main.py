"""
Pagewright FastAPI application.

Entry point for the API server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.config import settings
from backend.routes import sessions as session_routes
from backend.routes import targets as target_routes
from backend.services.session_store import session_store

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Sessions are in memory only; shutdown drops them.
    """
    logger.info(
        "Pagewright starting (env=%s, max_sessions=%d, default_target=%s)",
        settings.ENVIRONMENT,
        settings.MAX_SESSIONS,
        settings.DEFAULT_TARGET,
    )

    yield

    logger.info("Dropping %d open sessions", len(session_store))
    session_store.clear()


app = FastAPI(
    title="Pagewright",
    docs_url=None if settings.ENVIRONMENT == "production" else "/docs",
    redoc_url=None,
    lifespan=lifespan,
)

# Register routes
app.include_router(target_routes.router)
app.include_router(session_routes.router)


@app.get("/health")
async def health():
    """Health check endpoint for uptime monitoring."""
    return {"status": "ok", "sessions": len(session_store)}
