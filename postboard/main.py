"""Postboard Local API — FastAPI application for running the handler off-Lambda.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - /api/v1/posts answers exactly as the Lambda would for the same request
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - No CORSMiddleware: OPTIONS is a dispatched method with its own fixed headers

Run with `uvicorn postboard.main:app --reload` (STORAGE_BACKEND=memory for no AWS).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from postboard.api.routes import health, posts
from postboard.config import get_settings
from postboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Postboard API started (storage: {settings.storage_backend})")
    yield
    logger.info("Postboard API shutting down")


app = FastAPI(title="Postboard API", version="1.0.0", lifespan=lifespan)

app.include_router(health.router)
app.include_router(posts.router)
