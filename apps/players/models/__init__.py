# apps/players/models/__init__.py
# ================================================================================
"""
Aggregate re-exports for the players app models.

This file allows for convenient imports like `from apps.players.models import Player`.
"""

from __future__ import annotations

from .player import Player

__all__ = [
    "Player",
]
