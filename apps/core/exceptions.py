"""
Domain error taxonomy.

Every error carries the HTTP status the API surface should answer with; the
message is user-facing and returned verbatim in the ``{"error": ...}`` body.
"""

from __future__ import annotations

from typing import ClassVar

from apps.core.conf import (
    MSG_DATABASE_ERROR,
    MSG_MISSING_API_KEY,
    MSG_PLAYER_NOT_FOUND,
    MSG_UNEXPECTED,
)


class RiotStatsError(RuntimeError):
    status_code: ClassVar[int] = 500
    default_message: ClassVar[str] = MSG_UNEXPECTED

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MissingCredentialError(RiotStatsError):
    default_message = MSG_MISSING_API_KEY


class IdentityNotFound(RiotStatsError):
    status_code = 404
    default_message = MSG_PLAYER_NOT_FOUND


class UpstreamUnavailable(RiotStatsError): ...


class StoreError(RiotStatsError):
    default_message = MSG_DATABASE_ERROR


class PartialDataLoss(RiotStatsError):
    """A single match could not be resolved; never surfaced to the caller."""
