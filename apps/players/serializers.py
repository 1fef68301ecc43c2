# apps/players/serializers.py
# ================================================================================
"""
Read-only serializers for the player stats response.
Plain dict building avoids reflection overhead; field names follow the
client's camelCase contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.core.datatype import MatchPayload, PlayerStatsPayload

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apps.core.datatype import AggregateStats
    from apps.matches.models import MatchRecord


class PlayerStatsSerializer:
    """A collection of static methods for serializing stats payloads."""

    @staticmethod
    def serialize_match(record: MatchRecord) -> MatchPayload:
        return MatchPayload(
            match_id=record.match_id,
            puuid=record.player_id,
            gameMode=record.game_mode,
            championName=record.champion_name,
            kills=record.kills,
            deaths=record.deaths,
            assists=record.assists,
            win=record.win,
            gameCreation=record.game_creation,
        )

    @staticmethod
    def serialize_stats(matches: Sequence[MatchRecord], aggregates: AggregateStats) -> PlayerStatsPayload:
        """Combines the match window (most recent first) with its aggregates."""
        return PlayerStatsPayload(
            matches=[PlayerStatsSerializer.serialize_match(m) for m in matches],
            overallWins=aggregates["overallWins"],
            overallLosses=aggregates["overallLosses"],
            championWinRates=aggregates["championWinRates"],
        )
