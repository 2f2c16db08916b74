"""Trinity Flow API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map TrinityError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Navigation session registry created on startup via lifespan, held on app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Registry on app.state instead of a module-level dict: sessions stay
      independent and tests can substitute a virtual-time registry
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trinity.api.error_handlers import register_error_handlers
from trinity.api.routes import health, navigation, validation
from trinity.config import get_settings
from trinity.infrastructure.asyncio_scheduler import AsyncioScheduler
from trinity.infrastructure.observability import setup_logging
from trinity.services.navigation_sessions import NavigationSessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.navigation_sessions = NavigationSessionRegistry(
        scheduler_factory=AsyncioScheduler,
        timings=settings.navigation_timings(),
        initial_screen=settings.initial_screen,
        max_sessions=settings.max_navigation_sessions,
    )
    logger.info("Trinity Flow API started")
    yield
    app.state.navigation_sessions.clear()
    logger.info("Trinity Flow API shutting down")


app = FastAPI(
    title="Trinity Flow API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration (ExMA: no convention-over-config)
app.include_router(health.router)
app.include_router(validation.router)
app.include_router(navigation.router)

register_error_handlers(app)
