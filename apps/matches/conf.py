# apps/matches/conf.py
# ================================================================================
"""Configuration, constants, and Pydantic models for the 'matches' app."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

# ─── App-wide Constants ────────────────────────────────────────────────────────
MAX_MATCH_ID_LENGTH: Final[int] = 32
UNKNOWN_GAME_MODE: Final[str] = ""


# ─── Pydantic Validation Models ────────────────────────────────────────────────
# Data contract for the match-v5 detail payload. Only the fields the stats
# pipeline stores are declared; everything else upstream sends is ignored.


class ParticipantValidator(BaseModel):
    """One entry of `info.participants`."""

    puuid: str
    championName: str | None = None
    kills: int = Field(default=0, ge=0)
    deaths: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)
    win: bool | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class MatchInfoValidator(BaseModel):
    gameMode: str | None = None
    gameCreation: int = Field(ge=0, description="Epoch timestamp (milliseconds)")
    participants: list[ParticipantValidator] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore", frozen=True)

    def participant(self, puuid: str) -> ParticipantValidator | None:
        return next((p for p in self.participants if p.puuid == puuid), None)


class MatchDetailValidator(BaseModel):
    """
    Validates a full match detail response. Acts as a data contract for
    incoming data from the Riot API.
    """

    info: MatchInfoValidator

    model_config = ConfigDict(extra="ignore", frozen=True)
