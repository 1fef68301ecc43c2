# apps/matches/models/match_record.py
# ================================================================================
"""
One player's participation in one match: the scoreboard line the stats
endpoint aggregates over.
"""

from __future__ import annotations

from typing import Self

from django.db import models

from apps.matches.conf import MAX_MATCH_ID_LENGTH


class MatchRecordQuerySet(models.QuerySet["MatchRecord"]):
    """Custom queryset for the MatchRecord model with chainable filter methods."""

    def for_player(self, puuid: str) -> Self:
        return self.filter(player_id=puuid)

    def most_recent(self) -> Self:
        """Newest first by upstream creation time; id breaks ties deterministically."""
        return self.order_by("-game_creation", "-id")


class MatchRecord(models.Model):
    """
    Immutable once written. A match is stored once per tracked participant,
    enforced by the (match_id, player) unique constraint.
    """

    id = models.BigAutoField(primary_key=True)
    match_id = models.CharField(max_length=MAX_MATCH_ID_LENGTH, db_index=True)
    player = models.ForeignKey(
        "players.Player",
        on_delete=models.PROTECT,
        related_name="match_records",
        to_field="puuid",
        db_column="puuid",
    )

    game_mode = models.CharField(max_length=32, blank=True, default="")
    champion_name = models.CharField(max_length=64, blank=True, null=True)
    kills = models.PositiveSmallIntegerField(default=0)
    deaths = models.PositiveSmallIntegerField(default=0)
    assists = models.PositiveSmallIntegerField(default=0)
    win = models.BooleanField(null=True, blank=True)
    game_creation = models.BigIntegerField(
        db_index=True,
        help_text="Epoch milliseconds of match creation, as reported upstream.",
    )

    objects = MatchRecordQuerySet.as_manager()

    class Meta:
        db_table = "matches"
        ordering = ["-game_creation"]
        verbose_name = "Match record"
        verbose_name_plural = "Match records"
        constraints = [
            models.UniqueConstraint(fields=["match_id", "player"], name="match_record_unique_participant"),
        ]
        indexes = [
            models.Index(fields=["player", "-game_creation"], name="match_player_recent_idx"),
        ]

    @property
    def puuid(self) -> str:
        return self.player_id

    def __str__(self) -> str:
        return f"{self.champion_name or 'Unknown'} in {self.match_id} ({self.player_id})"
