"""Board Game Reviews API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"msg": ...} (api/error_handlers.py)
    - CORS configured from settings (not hardcoded)
    - Database manager opened on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema created at startup when DATABASE_CREATE_SCHEMA is set (no migrations)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from game_reviews.api.error_handlers import register_error_handlers
from game_reviews.api.routes import (
    categories,
    comments,
    endpoints,
    health,
    review_comments,
    reviews,
    users,
)
from game_reviews.config import get_settings
from game_reviews.infrastructure.database import close_db, init_db
from game_reviews.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
    logger.info("Game Reviews API started")
    yield
    await close_db()
    logger.info("Game Reviews API shut down")


app = FastAPI(
    title="Board Game Reviews API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(endpoints.router)
app.include_router(health.router)
app.include_router(categories.router)
app.include_router(users.router)
app.include_router(reviews.router)
app.include_router(review_comments.router)
app.include_router(comments.router)

register_error_handlers(app)
