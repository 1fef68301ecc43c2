"""Shared pytest fixtures: in-memory store and source fakes, Riot payload builders."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from apps.core.exceptions import UpstreamUnavailable
from apps.matches.models import MatchRecord
from apps.players.models import Player

PUUID = "puuid-test-0001"


class InMemoryStatsStore:
    """Dict-backed `StatsStore` used to drive the reconciler without a database."""

    def __init__(self) -> None:
        self.players: dict[str, Player] = {}
        self.records: dict[tuple[str, str], MatchRecord] = {}
        self.upserts: list[Player] = []
        self.inserts: list[MatchRecord] = []

    async def get_player(self, puuid: str) -> Player | None:
        return self.players.get(puuid)

    async def upsert_player(self, player: Player) -> None:
        self.upserts.append(player)
        self.players[player.puuid] = player

    async def get_recent_matches(self, puuid: str, limit: int) -> list[MatchRecord]:
        mine = [r for r in self.records.values() if r.player_id == puuid]
        return sorted(mine, key=lambda r: r.game_creation, reverse=True)[:limit]

    async def get_match(self, match_id: str, puuid: str) -> MatchRecord | None:
        return self.records.get((match_id, puuid))

    async def insert_match(self, record: MatchRecord) -> bool:
        key = (record.match_id, record.player_id)
        if key in self.records:
            return False
        self.records[key] = record
        self.inserts.append(record)
        return True

    def add_record(self, record: MatchRecord) -> None:
        self.records[(record.match_id, record.player_id)] = record


class FakeMatchSource:
    """`MatchSource` serving canned payloads and recording every call."""

    def __init__(self) -> None:
        self.match_ids: list[str] = []
        self.details: dict[str, dict[str, Any]] = {}
        self.failing: set[str] = set()
        self.id_calls: list[tuple[str, str, int]] = []
        self.detail_calls: list[str] = []

    async def get_match_ids(self, puuid: str, region: str, *, count: int) -> list[str]:
        self.id_calls.append((puuid, region, count))
        return self.match_ids[:count]

    async def get_match(self, match_id: str, region: str) -> dict[str, Any]:
        self.detail_calls.append(match_id)
        if match_id in self.failing:
            raise UpstreamUnavailable
        return self.details[match_id]


def build_match_detail(
    puuid: str,
    *,
    champion: str | None = "Ahri",
    win: bool | None = True,
    creation: int = 1_700_000_000_000,
    game_mode: str = "CLASSIC",
    kills: int = 5,
    deaths: int = 3,
    assists: int = 7,
) -> dict[str, Any]:
    """A trimmed match-v5 detail payload where `puuid` played one side."""
    return {
        "metadata": {"participants": [puuid, "someone-else"]},
        "info": {
            "gameMode": game_mode,
            "gameCreation": creation,
            "participants": [
                {
                    "puuid": "someone-else",
                    "championName": "Garen",
                    "kills": 1,
                    "deaths": 9,
                    "assists": 0,
                    "win": not win if win is not None else None,
                },
                {
                    "puuid": puuid,
                    "championName": champion,
                    "kills": kills,
                    "deaths": deaths,
                    "assists": assists,
                    "win": win,
                },
            ],
        },
    }


@pytest.fixture
def puuid() -> str:
    return PUUID


@pytest.fixture
def memory_store() -> InMemoryStatsStore:
    return InMemoryStatsStore()


@pytest.fixture
def match_source() -> FakeMatchSource:
    return FakeMatchSource()


@pytest.fixture
def match_detail() -> Callable[..., dict[str, Any]]:
    return build_match_detail


@pytest.fixture
def make_record(puuid: str) -> Callable[..., MatchRecord]:
    """Unsaved MatchRecord factory; numbering gives each record a distinct id and creation time."""

    def factory(
        n: int,
        *,
        champion: str | None = "Ahri",
        win: bool | None = True,
        owner: str | None = None,
    ) -> MatchRecord:
        return MatchRecord(
            match_id=f"NA1_{n}",
            player_id=owner or puuid,
            game_mode="CLASSIC",
            champion_name=champion,
            kills=1,
            deaths=1,
            assists=1,
            win=win,
            game_creation=1_700_000_000_000 + n,
        )

    return factory


class RiotApiStub:
    """
    Routes requests made through `httpx.MockTransport` to canned Riot responses.

    `accounts` maps "gameName#tagLine" to a puuid; unknown Riot IDs answer 404.
    """

    def __init__(self) -> None:
        self.accounts: dict[str, str] = {}
        self.match_ids: dict[str, list[str]] = {}
        self.details: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if request.url.path.startswith("/riot/account/v1/accounts/by-riot-id/"):
            puuid = self.accounts.get(f"{parts[-2]}#{parts[-1]}")
            if puuid is None:
                return httpx.Response(404, json={"status": {"status_code": 404, "message": "Data not found"}})
            return httpx.Response(200, json={"puuid": puuid, "gameName": parts[-2], "tagLine": parts[-1]})

        if request.url.path.endswith("/ids"):
            count = int(request.url.params.get("count", 20))
            return httpx.Response(200, json=self.match_ids.get(parts[-2], [])[:count])

        detail = self.details.get(parts[-1])
        if detail is None:
            return httpx.Response(500, json={"status": {"status_code": 500, "message": "Internal error"}})
        return httpx.Response(200, json=detail)

    def paths(self, suffix: str = "") -> list[str]:
        return [r.url.path for r in self.requests if r.url.path.endswith(suffix)]


@pytest.fixture
def riot_api() -> RiotApiStub:
    return RiotApiStub()
