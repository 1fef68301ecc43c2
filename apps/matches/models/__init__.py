# apps/matches/models/__init__.py
# ================================================================================
"""
Match-data models.

Re-exports the primary models for easy access from other apps.
"""

from __future__ import annotations

from .match_record import MatchRecord, MatchRecordQuerySet

__all__ = [
    "MatchRecord",
    "MatchRecordQuerySet",
]
