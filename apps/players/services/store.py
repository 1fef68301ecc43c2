# apps/players/services/store.py
# ================================================================================
"""
Django ORM implementation of the `StatsStore` contract.

Reads propagate as `StoreError`. Writes are best-effort: a failed write is
logged and swallowed so the read path keeps serving.
"""

from __future__ import annotations

import structlog
from django.db import DatabaseError

from apps.core.exceptions import StoreError
from apps.matches.models import MatchRecord
from apps.players.conf import MAX_REGION_LENGTH
from apps.players.models import Player

log = structlog.get_logger(__name__).bind(component="DjangoStatsStore")

_MATCH_FIELDS = ("game_mode", "champion_name", "kills", "deaths", "assists", "win", "game_creation")


class DjangoStatsStore:
    """Players and match records persisted through the async ORM API."""

    # ------------------------------------------------------------- reads
    async def get_player(self, puuid: str) -> Player | None:
        try:
            return await Player.objects.filter(puuid=puuid).afirst()
        except DatabaseError as e:
            log.exception("Player read failed", puuid=puuid)
            raise StoreError from e

    async def get_recent_matches(self, puuid: str, limit: int) -> list[MatchRecord]:
        qs = MatchRecord.objects.for_player(puuid).most_recent()[:limit]
        try:
            return [record async for record in qs]
        except DatabaseError as e:
            log.exception("Recent matches read failed", puuid=puuid)
            raise StoreError from e

    async def get_match(self, match_id: str, puuid: str) -> MatchRecord | None:
        try:
            return await MatchRecord.objects.filter(match_id=match_id, player_id=puuid).afirst()
        except DatabaseError as e:
            log.exception("Match read failed", match_id=match_id, puuid=puuid)
            raise StoreError from e

    # ------------------------------------------------------------- writes
    async def upsert_player(self, player: Player) -> None:
        try:
            await Player.objects.aupdate_or_create(
                puuid=player.puuid,
                defaults={
                    "game_name": player.game_name,
                    "tag_line": player.tag_line,
                    "region": player.region[:MAX_REGION_LENGTH],
                    "last_refreshed_at": player.last_refreshed_at,
                },
            )
        except DatabaseError:
            log.exception("Player upsert failed", puuid=player.puuid)

    async def insert_match(self, record: MatchRecord) -> bool:
        """Insert-if-absent keyed on (match_id, puuid); concurrent duplicates collapse to one row."""
        try:
            _, created = await MatchRecord.objects.aget_or_create(
                match_id=record.match_id,
                player_id=record.player_id,
                defaults={field: getattr(record, field) for field in _MATCH_FIELDS},
            )
        except DatabaseError:
            log.exception("Match insert failed", match_id=record.match_id, puuid=record.player_id)
            return False

        if not created:
            log.debug("Match already stored", match_id=record.match_id, puuid=record.player_id)
        return created
