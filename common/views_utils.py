# common/views_utils.py
# ======================================================================
from __future__ import annotations

from typing import Any

import orjson
import structlog
from django.http import (
    Http404,
    HttpRequest,
    HttpResponse,
)
from django.views import View

from apps.core.conf import MSG_UNEXPECTED
from apps.core.exceptions import RiotStatsError

log = structlog.get_logger(__name__).bind(component="ViewsUtils")


class OrjsonResponse(HttpResponse):
    """
    A JSON response encoded with `orjson`.

    Data are encoded as UTF-8 bytes; `content_type` is set to
    `application/json` automatically.
    """

    def __init__(self, data: Any, *, status: int = 200, **kw: Any) -> None:
        content = orjson.dumps(data, option=orjson.OPT_NAIVE_UTC)
        kw.setdefault("content_type", "application/json")
        super().__init__(content=content, status=status, **kw)


def error_response(message: str, *, status: int) -> OrjsonResponse:
    return OrjsonResponse({"error": message}, status=status)


# ------------------------------------------------------------------ BaseAsyncView
class BaseAsyncView(View):
    """
    Base-class for *async* Django CBVs with

        • Centralised error handling (`{"error": ...}` bodies)
        • orjson responses
        • Domain errors answered with their own status code
    """

    # ───────────────────────────── dispatch ──────────────────────────
    async def dispatch(self, request: HttpRequest, *args: Any, **kw: Any):  # type: ignore[override]
        self.request = request

        method = request.method.lower()
        handler = getattr(self, method, None) if method in self.http_method_names else None
        if handler is None:
            return await self.http_method_not_allowed(request, *args, **kw)

        try:
            return await handler(request, *args, **kw)
        except RiotStatsError as exc:
            log.warning(
                "Request failed",
                path=request.path,
                error=type(exc).__name__,
                status=exc.status_code,
                err=str(exc),
            )
            return error_response(str(exc), status=exc.status_code)
        except Http404 as exc:
            log.info("Resource not found", path=request.path, err=str(exc))
            return error_response(str(exc) or "Not found.", status=404)
        except Exception as exc:
            log.exception("Unhandled API error", path=request.path, exc_info=exc)
            return error_response(MSG_UNEXPECTED, status=500)

    async def http_method_not_allowed(self, request: HttpRequest, *a: Any, **k: Any) -> HttpResponse:
        log.warning("Method Not Allowed", method=request.method, path=request.path)
        response = error_response(f'Method "{request.method}" not allowed.', status=405)
        response["Allow"] = ", ".join(m.upper() for m in self._allowed_methods())
        return response
