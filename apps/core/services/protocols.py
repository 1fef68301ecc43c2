# apps/core/services/protocols.py
"""
Defines the structural contracts (Protocols) the stats pipeline depends on.

Using protocols allows the reconciler to be driven by the Django-backed store
and the live Riot client in production, and by in-memory fakes in tests, as
long as they adhere to the defined "shape".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from apps.matches.models import MatchRecord
    from apps.players.models import Player


class StatsStore(Protocol):
    """
    Persistence contract for players and their match records.

    Reads raise `StoreError` on failure. Writes are best-effort: failures are
    logged by the implementation and never raised.
    """

    async def get_player(self, puuid: str) -> Player | None:
        """Returns the player row, or None when the puuid is unknown."""
        ...

    async def upsert_player(self, player: Player) -> None:
        """Creates or replaces the player row keyed by puuid."""
        ...

    async def get_recent_matches(self, puuid: str, limit: int) -> list[MatchRecord]:
        """Returns up to `limit` records for the player, most recent first."""
        ...

    async def get_match(self, match_id: str, puuid: str) -> MatchRecord | None:
        """Returns the record for (match_id, puuid) if it is already stored."""
        ...

    async def insert_match(self, record: MatchRecord) -> bool:
        """
        Inserts the record unless one for (match_id, puuid) already exists.

        Returns True only when a new row was written.
        """
        ...


class MatchSource(Protocol):
    """Remote contract for match listing and match detail lookups."""

    async def get_match_ids(self, puuid: str, region: str, *, count: int) -> list[str]:
        """Most recent match ids for the player, newest first."""
        ...

    async def get_match(self, match_id: str, region: str) -> dict[str, Any]:
        """Full match payload including the per-participant breakdown."""
        ...
