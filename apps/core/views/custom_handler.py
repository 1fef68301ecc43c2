# apps/core/views/custom_handler.py
"""
URLconf-level error handlers.

Django inspects these signatures with its check framework and may call them
from a worker thread, so they stay synchronous.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from apps.core.conf import MSG_UNEXPECTED
from common.views_utils import error_response

if TYPE_CHECKING:
    from django.http import HttpRequest, HttpResponse

log = structlog.get_logger(__name__).bind(component="ErrorHandlers")


def json_404_handler(request: HttpRequest, exception: Exception) -> HttpResponse:
    log.info("Endpoint not found", path=request.path)
    return error_response("The requested endpoint was not found.", status=404)


def json_500_handler(request: HttpRequest) -> HttpResponse:
    return error_response(MSG_UNEXPECTED, status=500)
