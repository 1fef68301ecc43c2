"""
apps.core.views
---------------

Makes the ASGI-level endpoints directly importable via:

    from apps.core.views import health_check
"""

from __future__ import annotations

from .health import health_check

__all__: list[str] = [
    "health_check",
]
