"""Get Lost Portal API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PortalError to structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The lifespan owns the database manager and email service; both live on
      app.state and are disposed on shutdown

Run with: uvicorn portal.main:app --reload --app-dir backend
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from portal.api.error_handlers import register_error_handlers
from portal.api.routes import (
    admin, auth_diagnostics, book_features, health, system_book_assets,
)
from portal.config import async_database_url, get_settings
from portal.infrastructure.database import DatabaseSessionManager
from portal.infrastructure.observability import setup_logging
from portal.services.email import EmailService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db_manager = DatabaseSessionManager(
        async_database_url(settings.database_url),
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.email_service = EmailService.from_settings(settings)
    logger.info("Portal API started")
    yield
    await app.state.db_manager.dispose()
    logger.info("Portal API shutting down")


app = FastAPI(
    title="Get Lost Portal API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(admin.router)
app.include_router(system_book_assets.router)
app.include_router(book_features.router)
app.include_router(auth_diagnostics.router)

register_error_handlers(app)
