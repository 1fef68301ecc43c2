"""Core data types and type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NotRequired, TypedDict

# Type aliases for better clarity
type JsonValue = str | int | float | bool | None
type JsonDict = dict[str, JsonValue]

# ─── Identity ─────────────────────────────


@dataclass(slots=True, frozen=True, kw_only=True)
class PlayerIdentity:
    """A resolved Riot account together with the names it was looked up by."""

    puuid: str
    game_name: str
    tag_line: str
    region: str

    def __post_init__(self) -> None:
        if not self.puuid:
            msg = "puuid must be a non-empty string"
            raise ValueError(msg)

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


# ─── Response payloads ──────────────────────


class MatchPayload(TypedDict):
    """One stored match participation, as returned to the client."""

    match_id: str
    puuid: str
    gameMode: str
    championName: str | None
    kills: int
    deaths: int
    assists: int
    win: bool | None
    gameCreation: int


class ChampionWinRate(TypedDict):
    championName: str
    gamesPlayed: int
    wins: int


class AggregateStats(TypedDict):
    """Derived win/loss and champion usage over the recent match window."""

    overallWins: int
    overallLosses: int
    championWinRates: list[ChampionWinRate]


class PlayerStatsPayload(AggregateStats):
    """Full body of a successful stats response."""

    matches: list[MatchPayload]
    message: NotRequired[str]


# ─── Factory Functions ──────────────────────


def empty_stats_payload(message: str) -> PlayerStatsPayload:
    """Zeroed aggregates with an explanatory message."""
    return PlayerStatsPayload(
        message=message,
        matches=[],
        overallWins=0,
        overallLosses=0,
        championWinRates=[],
    )
