# apps/core/views/health.py

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING

from django.conf import settings
from django.db import DatabaseError, connections
from django.utils import timezone
from starlette.responses import JSONResponse

from apps.core.exceptions import MissingCredentialError
from apps.core.services.riot_client import RiotApiConfig

if TYPE_CHECKING:
    from starlette.requests import Request

# --------------------------------------------------------------------------- helpers


def _simple_db_query() -> None:
    """Gets a connection and performs a simple query within the same thread."""
    db_conn = connections["default"]
    with db_conn.cursor() as cur:
        cur.execute("SELECT 1")
        cur.fetchone()


async def _check_database() -> dict[str, str | float]:
    start = time.perf_counter()
    try:
        await asyncio.to_thread(_simple_db_query)
        return {
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - start) * 1000, 2),
        }
    except DatabaseError as exc:
        return {"status": "unhealthy", "error": str(exc)}


async def _check_riot_credential() -> dict[str, str]:
    """The API key must be configured; the Riot API itself is not called."""
    try:
        RiotApiConfig.from_settings().check()
    except MissingCredentialError as exc:
        return {"status": "unhealthy", "error": str(exc)}
    return {"status": "healthy"}


# --------------------------------------------------------------------------- view
async def health_check(request: Request) -> JSONResponse:
    """
    Health endpoint.
    • `?check=basic`  → liveness-only.
    """
    start_view = time.perf_counter()
    base_payload = {
        "timestamp": timezone.now().isoformat(),
        "version": getattr(settings, "APP_VERSION", "unknown"),
        "environment": getattr(settings, "ENVIRONMENT", "unknown"),
    }

    if request.query_params.get("check") == "basic":
        return JSONResponse({"status": "ok", **base_payload})

    db_result, credential_result = await asyncio.gather(
        _check_database(),
        _check_riot_credential(),
    )
    checks = {
        "database": db_result,
        "riot_api_key": credential_result,
    }

    overall_healthy = all(v["status"] == "healthy" for v in checks.values())
    response = {
        "status": "healthy" if overall_healthy else "unhealthy",
        "checks": checks,
        "response_time_ms": round((time.perf_counter() - start_view) * 1000, 2),
        **base_payload,
    }
    return JSONResponse(response, status_code=200 if overall_healthy else 503)
