"""
Django ASGI application wrapped in Starlette for CORS, health and lifespan.
"""

from __future__ import annotations

import asyncio
import os
import time
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import structlog
from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.asgi import get_asgi_application
from django.core.management import call_command
from django.db import DatabaseError, connections
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.routing import BaseRoute, Mount, Route

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from django.db.backends.base.base import BaseDatabaseWrapper

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.local")

# get_asgi_application() runs django.setup(); app imports must come after it.
django_app = get_asgi_application()

from apps.core.views import health_check  # noqa: E402

# --- Constants
DB_WARMUP_TIMEOUT = 5.0
MIGRATE_TIMEOUT = 60.0
SHUTDOWN_TIMEOUT = 10.0

logger = structlog.get_logger(__name__)


class WarmupError(Exception):
    """Raised when a warmup operation fails."""


async def _apply_migrations() -> None:
    def _migrate() -> None:
        call_command("migrate", interactive=False, verbosity=0)

    try:
        await asyncio.wait_for(asyncio.to_thread(_migrate), timeout=MIGRATE_TIMEOUT)
    except TimeoutError as e:
        msg = f"Migrations timed out after {MIGRATE_TIMEOUT}s"
        raise WarmupError(msg) from e
    except DatabaseError as e:
        msg = f"Migrations failed: {e}"
        raise WarmupError(msg) from e


async def _test_database_connection() -> None:
    """Test database connectivity with timeout protection."""

    def _db_test() -> None:
        conn: BaseDatabaseWrapper = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()

    try:
        await asyncio.wait_for(asyncio.to_thread(_db_test), timeout=DB_WARMUP_TIMEOUT)
    except TimeoutError as e:
        msg = f"Database connection timed out after {DB_WARMUP_TIMEOUT}s"
        raise WarmupError(msg) from e
    except DatabaseError as e:
        msg = f"Database connection failed: {e}"
        raise WarmupError(msg) from e


async def _warm_up_application() -> None:
    logger.info("Starting application warm-up...")
    start_time = time.monotonic()

    await _test_database_connection()
    if settings.MIGRATE_ON_STARTUP:
        await _apply_migrations()
        logger.info("Database schema up to date")

    if not settings.RIOT_API_CONFIG.API_KEY:
        logger.warning("RIOT_API_KEY is not set; stats requests will fail until it is configured")

    logger.info("Application warm-up completed", duration_s=f"{time.monotonic() - start_time:.2f}")


# --- Centralized Lifespan Manager ---
@asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    """
    Startup: verify the database and bring the schema up to date.
    Shutdown: close database connections.
    """
    logger.info("ASGI application starting up...")
    try:
        await _warm_up_application()
    except WarmupError as e:
        logger.error("Critical error during application startup. Aborting.", error=str(e))
        raise
    logger.info("Application startup complete. Ready to serve requests.")

    yield

    logger.info("ASGI application shutting down...")
    try:
        async with asyncio.timeout(SHUTDOWN_TIMEOUT):
            await sync_to_async(connections.close_all)()
            logger.info("Database connections closed")
    except TimeoutError:
        logger.warning(f"Shutdown timed out after {SHUTDOWN_TIMEOUT}s. Forcing exit.")
    except DatabaseError as e:
        logger.exception("Error during shutdown cleanup", error=str(e))
    logger.info("ASGI application shutdown complete.")


# --- Application Factory Functions ---
def create_middleware() -> list[Middleware]:
    return [
        Middleware(
            CORSMiddleware,
            allow_origins=getattr(settings, "CORS_ALLOWED_ORIGINS", ["*"]),
            allow_methods=["GET", "HEAD", "OPTIONS"],
            allow_headers=["*"],
        ),
    ]


def create_routes() -> list[BaseRoute]:
    return [
        Route("/health", endpoint=health_check, methods=["GET", "HEAD"]),
        Mount("/", app=django_app),
    ]


application = Starlette(
    debug=settings.DEBUG,
    routes=create_routes(),
    middleware=create_middleware(),
    lifespan=lifespan,
)
