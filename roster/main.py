"""User Roster - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RosterError -> structured JSON responses
    - One UserStore per app, held on app.state and injected via get_user_store
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Store created with the app, not inside lifespan: ASGI test transports
      that skip lifespan still get a working store

Run with: uvicorn roster.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from roster.api.error_handlers import register_error_handlers
from roster.api.routes import health, users
from roster.config import get_settings
from roster.infrastructure.observability import setup_logging
from roster.infrastructure.user_store import UserStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title=get_settings().app_name, version="1.0.0", lifespan=lifespan,
)
app.state.user_store = UserStore()

# Routes - explicit registration
app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)
