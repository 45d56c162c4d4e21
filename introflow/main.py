"""IntroFlow API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map IntroFlowError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - SQLite URLs get their tables created on startup; PostgreSQL is migrated
      by Alembic
    - Mutual routes mounted twice: /api/mutuals and /api/mutual-connections
      are the same resource
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from introflow.api.error_handlers import register_error_handlers
from introflow.api.routes import (
    auth, health, job_preferences, jobs, linkedin, messages, mutuals, stats, tools,
)
from introflow.config import get_settings
from introflow.infrastructure.database import init_db
from introflow.infrastructure.observability import setup_logging

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
    if settings.database_url.startswith("sqlite"):
        await manager.create_all()
    logger.info("IntroFlow API started")
    yield
    logger.info("IntroFlow API shutting down")
    await manager.dispose()


app = FastAPI(title="IntroFlow API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(linkedin.router)
app.include_router(job_preferences.router)
app.include_router(jobs.router)
app.include_router(mutuals.router, prefix="/api/mutuals")
app.include_router(mutuals.router, prefix="/api/mutual-connections")
app.include_router(messages.router)
app.include_router(stats.router)
app.include_router(tools.router)

register_error_handlers(app)
