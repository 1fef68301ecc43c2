# apps/players/services/stats_reconciler.py
# ================================================================================
"""
Cache-or-fetch reconciliation of a player's recent matches.

A pass either serves the stored window untouched (the player was refreshed
less than `PLAYER_STATS_TTL` ago) or runs a refresh:

1. upsert the player with `last_refreshed_at = now` before touching upstream,
2. list the most recent match ids,
3. resolve every id concurrently: reuse a stored record, or fetch the detail
   and insert the player's line; any single failure only skips that match,
4. re-read the window from the store and aggregate it.

The store, never the in-memory fetch results, is the basis of every response.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from enum import Enum, auto
from typing import TYPE_CHECKING

import structlog
from django.utils import timezone

from apps.core.conf import MSG_CACHED_MATCHES_DB_ERROR
from apps.core.datatype import PlayerStatsPayload, empty_stats_payload
from apps.core.exceptions import PartialDataLoss, RiotStatsError, StoreError
from apps.matches.schemas.match_row import MatchRow
from apps.players.conf import MSG_NO_CACHED_MATCHES, MSG_NO_MATCHES, PLAYER_STATS_TTL, RECENT_MATCH_LIMIT
from apps.players.models import Player
from apps.players.serializers import PlayerStatsSerializer
from apps.players.services.aggregation import compute_aggregate_stats

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime, timedelta

    from apps.core.datatype import PlayerIdentity
    from apps.core.services.protocols import MatchSource, StatsStore

log = structlog.get_logger(__name__).bind(component="StatsReconciler")


class Resolution(Enum):
    """How a single match id settled during a refresh pass."""

    CACHED = auto()
    FETCHED = auto()
    SKIPPED = auto()

    def __str__(self) -> str:
        return self.name.lower()


class StatsReconciler:
    def __init__(
        self,
        *,
        store: StatsStore,
        source: MatchSource,
        ttl: timedelta = PLAYER_STATS_TTL,
        match_limit: int = RECENT_MATCH_LIMIT,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self.store = store
        self.source = source
        self.ttl = ttl
        self.match_limit = match_limit
        self._clock = clock

    async def reconcile(self, identity: PlayerIdentity) -> PlayerStatsPayload:
        now = self._clock()
        player = await self.store.get_player(identity.puuid)

        if player is not None and player.is_fresh(now, self.ttl):
            log.info("Serving cached stats", puuid=identity.puuid, refreshed_at=player.last_refreshed_at.isoformat())
            try:
                return await self._stats_from_store(identity.puuid, empty_message=MSG_NO_CACHED_MATCHES)
            except StoreError as e:
                raise StoreError(MSG_CACHED_MATCHES_DB_ERROR) from e

        return await self._refresh(identity, now)

    # ------------------------------------------------------------- refresh
    async def _refresh(self, identity: PlayerIdentity, now: datetime) -> PlayerStatsPayload:
        log.info("Refreshing player matches", puuid=identity.puuid, riot_id=identity.riot_id)

        await self.store.upsert_player(
            Player(
                puuid=identity.puuid,
                game_name=identity.game_name,
                tag_line=identity.tag_line,
                region=identity.region,
                last_refreshed_at=now,
            ),
        )

        match_ids = await self.source.get_match_ids(identity.puuid, identity.region, count=self.match_limit)
        if not match_ids:
            log.info("No matches upstream", puuid=identity.puuid)
            return empty_stats_payload(MSG_NO_MATCHES)

        results = await asyncio.gather(
            *(self._resolve_match(match_id, identity) for match_id in match_ids),
            return_exceptions=True,
        )

        outcomes: Counter[str] = Counter()
        for match_id, result in zip(match_ids, results, strict=True):
            if isinstance(result, RiotStatsError):
                log.warning("Match skipped", match_id=match_id, reason=str(result), error=type(result).__name__)
                outcomes[str(Resolution.SKIPPED)] += 1
            elif isinstance(result, BaseException):
                log.error("Match resolution crashed", match_id=match_id, exc_info=result)
                outcomes[str(Resolution.SKIPPED)] += 1
            else:
                outcomes[str(result)] += 1

        log.info("Reconciliation complete", puuid=identity.puuid, requested=len(match_ids), **outcomes)
        return await self._stats_from_store(identity.puuid, empty_message=MSG_NO_MATCHES)

    async def _resolve_match(self, match_id: str, identity: PlayerIdentity) -> Resolution:
        if await self.store.get_match(match_id, identity.puuid) is not None:
            return Resolution.CACHED

        detail = await self.source.get_match(match_id, identity.region)
        row = MatchRow.parse(detail, match_id=match_id, puuid=identity.puuid)
        if row is None:
            msg = f"No usable participant entry in match {match_id}"
            raise PartialDataLoss(msg)

        await self.store.insert_match(row.to_record())
        return Resolution.FETCHED

    # ------------------------------------------------------------- output
    async def _stats_from_store(self, puuid: str, *, empty_message: str) -> PlayerStatsPayload:
        matches = await self.store.get_recent_matches(puuid, self.match_limit)
        if not matches:
            return empty_stats_payload(empty_message)
        return PlayerStatsSerializer.serialize_stats(matches, compute_aggregate_stats(matches))
