# apps/players/services/aggregation.py
# ================================================================================
"""
Win/loss and champion-usage aggregation over a player's recent match window.

The input is expected most recent first. Champions tied on games played and
wins keep the order in which they first appear in that window.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from apps.core.datatype import AggregateStats, ChampionWinRate
from apps.players.conf import TOP_CHAMPIONS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from apps.matches.models import MatchRecord


def compute_aggregate_stats(matches: Sequence[MatchRecord], *, top_n: int = TOP_CHAMPIONS) -> AggregateStats:
    overall_wins = sum(1 for m in matches if m.win is True)
    overall_losses = sum(1 for m in matches if m.win is False)

    # Counter preserves first-insertion order, which sorted() keeps for ties.
    games: Counter[str] = Counter()
    wins: Counter[str] = Counter()
    for match in matches:
        if not match.champion_name:
            continue
        games[match.champion_name] += 1
        if match.win:
            wins[match.champion_name] += 1

    ranked = sorted(games, key=lambda name: (games[name], wins[name]), reverse=True)
    return AggregateStats(
        overallWins=overall_wins,
        overallLosses=overall_losses,
        championWinRates=[
            ChampionWinRate(championName=name, gamesPlayed=games[name], wins=wins[name])
            for name in ranked[:top_n]
        ],
    )
