# apps/players/services/player_stats_service.py
# ================================================================================
"""
Service layer behind the stats endpoint and the `player_stats` command:
resolve a Riot ID to a puuid, then hand the player to the reconciler.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Self

import structlog

from apps.core.datatype import PlayerIdentity
from apps.core.services.riot_client import RiotApiClient
from apps.players.services.stats_reconciler import StatsReconciler
from apps.players.services.store import DjangoStatsStore

if TYPE_CHECKING:
    from apps.core.datatype import PlayerStatsPayload
    from apps.core.services.protocols import StatsStore

log = structlog.get_logger(__name__).bind(component="PlayerStatsService")


class PlayerStatsService:
    """
    Owns the Riot client session for the duration of one request.

    Use as an async context manager; entering validates the API credential.
    """

    def __init__(self, *, client: RiotApiClient, store: StatsStore) -> None:
        self.client = client
        self.store = store

    @classmethod
    def from_settings(cls) -> Self:
        return cls(client=RiotApiClient(), store=DjangoStatsStore())

    async def __aenter__(self) -> Self:
        await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def get_player_stats(self, game_name: str, tag_line: str, region: str) -> PlayerStatsPayload:
        start_time = time.perf_counter()

        puuid = await self.client.resolve_puuid(game_name, tag_line, region)
        identity = PlayerIdentity(puuid=puuid, game_name=game_name, tag_line=tag_line, region=region)

        reconciler = StatsReconciler(store=self.store, source=self.client)
        payload = await reconciler.reconcile(identity)

        log.info(
            "Stats served",
            puuid=puuid,
            matches=len(payload["matches"]),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
        )
        return payload
