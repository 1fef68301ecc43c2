from __future__ import annotations

from io import StringIO

import httpx
import orjson
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.core.services.riot_client import RiotApiClient
from apps.players.services.player_stats_service import PlayerStatsService
from apps.players.services.store import DjangoStatsStore


@pytest.fixture(autouse=True)
def stub_service(monkeypatch, riot_api):
    def from_settings():
        session = httpx.AsyncClient(transport=httpx.MockTransport(riot_api))
        return PlayerStatsService(client=RiotApiClient(session=session), store=DjangoStatsStore())

    monkeypatch.setattr(PlayerStatsService, "from_settings", staticmethod(from_settings))


@pytest.mark.django_db(transaction=True)
def test_json_output(riot_api, puuid, match_detail):
    riot_api.accounts["Faker#KR1"] = puuid
    riot_api.match_ids[puuid] = ["KR_1"]
    riot_api.details["KR_1"] = match_detail(puuid, champion="Ryze", win=True)
    out = StringIO()

    call_command("player_stats", "Faker", "KR1", "kr1", "--json", stdout=out)

    data = orjson.loads(out.getvalue())
    assert data["overallWins"] == 1
    assert data["championWinRates"] == [{"championName": "Ryze", "gamesPlayed": 1, "wins": 1}]


@pytest.mark.django_db(transaction=True)
def test_summary_output(riot_api, puuid):
    riot_api.accounts["Faker#KR1"] = puuid
    out = StringIO()

    call_command("player_stats", "Faker", "KR1", "kr1", stdout=out)

    assert "Faker#KR1" in out.getvalue()
    assert "No matches found for this player" in out.getvalue()


@pytest.mark.django_db(transaction=True)
def test_unknown_player_raises_command_error():
    with pytest.raises(CommandError, match="Player not found"):
        call_command("player_stats", "Nobody", "0000", "na1")
