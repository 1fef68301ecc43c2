# apps/matches/schemas/match_row.py
# ================================================================================
"""
Defines the MatchRow dataclass, a schema for extracting one player's
participation out of a raw match detail payload before it becomes a
`MatchRecord`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import ValidationError

from apps.matches.conf import UNKNOWN_GAME_MODE, MatchDetailValidator
from apps.matches.models import MatchRecord

if TYPE_CHECKING:
    from collections.abc import Mapping

log = structlog.get_logger(__name__).bind(component="MatchRow")


@dataclass(frozen=True, slots=True)
class MatchRow:
    """
    A DTO for a single player's line in a single match.

    Built from the upstream payload with `parse`; converted into an unsaved
    model instance with `to_record`.
    """

    match_id: str
    puuid: str
    game_mode: str
    champion_name: str | None
    kills: int
    deaths: int
    assists: int
    win: bool | None
    game_creation: int

    def to_record(self) -> MatchRecord:
        return MatchRecord(
            match_id=self.match_id,
            player_id=self.puuid,
            game_mode=self.game_mode,
            champion_name=self.champion_name,
            kills=self.kills,
            deaths=self.deaths,
            assists=self.assists,
            win=self.win,
            game_creation=self.game_creation,
        )

    @classmethod
    def parse(cls, src: Mapping[str, Any], *, match_id: str, puuid: str) -> MatchRow | None:
        """
        Factory method to safely parse a raw match payload for one participant.

        Returns None when the payload is malformed or the player did not take
        part in the match.
        """
        try:
            detail = MatchDetailValidator.model_validate(src)
        except ValidationError as e:
            log.warning("Match payload failed validation", match_id=match_id, err=e.errors())
            return None

        participant = detail.info.participant(puuid)
        if participant is None:
            log.warning("Participant not found in match data", match_id=match_id, puuid=puuid)
            return None

        return cls(
            match_id=match_id,
            puuid=puuid,
            game_mode=detail.info.gameMode or UNKNOWN_GAME_MODE,
            champion_name=participant.championName or None,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            win=participant.win,
            game_creation=detail.info.gameCreation,
        )
