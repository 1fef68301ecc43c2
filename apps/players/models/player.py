# apps/players/models/player.py
# ================================================================================
"""The core Player model, representing a tracked Riot account."""

from __future__ import annotations

from datetime import datetime, timedelta

from django.db import models

from apps.players.conf import MAX_REGION_LENGTH

__all__ = ("Player",)


class Player(models.Model):
    """One Riot account, keyed by its puuid, and when its matches were last synced."""

    puuid = models.CharField(primary_key=True, max_length=128)
    game_name = models.CharField(max_length=64, blank=True, default="", db_index=True)
    tag_line = models.CharField(max_length=16, blank=True, default="")
    region = models.CharField(max_length=MAX_REGION_LENGTH, blank=True, default="")
    last_refreshed_at = models.DateTimeField(
        blank=True,
        null=True,
        db_index=True,
        help_text="When the last reconciliation pass started.",
    )

    class Meta:
        db_table = "players"
        ordering = ["-last_refreshed_at"]
        verbose_name = "Player"
        verbose_name_plural = "Players"

    def __str__(self) -> str:
        if self.game_name:
            return f"{self.game_name}#{self.tag_line}"
        return f"Player {self.puuid}"

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        """True when the last refresh is strictly younger than `ttl`."""
        if self.last_refreshed_at is None:
            return False
        return now - self.last_refreshed_at < ttl
