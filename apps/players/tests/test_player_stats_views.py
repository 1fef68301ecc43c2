from __future__ import annotations

from datetime import timedelta

import httpx
import pytest
from django.urls import reverse
from django.utils import timezone

from apps.core.exceptions import StoreError
from apps.core.services.riot_client import RiotApiClient
from apps.matches.models import MatchRecord
from apps.players.models import Player
from apps.players.services.player_stats_service import PlayerStatsService
from apps.players.services.store import DjangoStatsStore
from apps.players.views import PlayerStatsView
from config.settings.base import RiotApiSettings


@pytest.fixture(autouse=True)
def riot_transport(monkeypatch, riot_api):
    """Every view request talks to the in-process Riot stub instead of the network."""

    def factory():
        session = httpx.AsyncClient(transport=httpx.MockTransport(riot_api))
        return PlayerStatsService(client=RiotApiClient(session=session), store=DjangoStatsStore())

    monkeypatch.setattr(PlayerStatsView, "service_factory", staticmethod(factory))
    return riot_api


def stats_url(game_name="Faker", tag_line="KR1", region="kr1"):
    return reverse("players:player-stats", args=[game_name, tag_line, region])


@pytest.mark.django_db(transaction=True)
async def test_stats_refresh_persists_matches(async_client, riot_api, puuid, match_detail):
    riot_api.accounts["Faker#KR1"] = puuid
    riot_api.match_ids[puuid] = ["KR_2", "KR_1"]
    riot_api.details["KR_2"] = match_detail(puuid, champion="Azir", win=True, creation=1_700_000_002_000)
    riot_api.details["KR_1"] = match_detail(puuid, champion="Azir", win=False, creation=1_700_000_001_000)

    response = await async_client.get(stats_url())

    assert response.status_code == 200
    data = response.json()
    assert [m["match_id"] for m in data["matches"]] == ["KR_2", "KR_1"]
    assert data["matches"][0] == {
        "match_id": "KR_2",
        "puuid": puuid,
        "gameMode": "CLASSIC",
        "championName": "Azir",
        "kills": 5,
        "deaths": 3,
        "assists": 7,
        "win": True,
        "gameCreation": 1_700_000_002_000,
    }
    assert data["overallWins"] == 1
    assert data["overallLosses"] == 1
    assert data["championWinRates"] == [{"championName": "Azir", "gamesPlayed": 2, "wins": 1}]

    player = await Player.objects.aget(puuid=puuid)
    assert player.game_name == "Faker"
    assert player.region == "kr1"
    assert await MatchRecord.objects.filter(player_id=puuid).acount() == 2


@pytest.mark.django_db(transaction=True)
async def test_routes_to_the_regional_cluster_with_token(async_client, riot_api, puuid):
    riot_api.accounts["Faker#KR1"] = puuid

    await async_client.get(stats_url())

    assert {r.url.host for r in riot_api.requests} == {"asia.api.riotgames.com"}
    assert all(r.headers["X-Riot-Token"] == "RGAPI-test-key" for r in riot_api.requests)
    assert riot_api.requests[-1].url.params["count"] == "20"


@pytest.mark.django_db(transaction=True)
async def test_fresh_player_skips_match_calls(async_client, riot_api, puuid, make_record):
    riot_api.accounts["Faker#KR1"] = puuid
    await Player.objects.acreate(
        puuid=puuid, game_name="Faker", tag_line="KR1", region="kr1", last_refreshed_at=timezone.now()
    )
    await make_record(1, champion="Ahri", win=True).asave()

    response = await async_client.get(stats_url())

    assert response.status_code == 200
    assert response.json()["overallWins"] == 1
    assert riot_api.paths("/ids") == []
    assert len(riot_api.requests) == 1


@pytest.mark.django_db(transaction=True)
async def test_stale_player_refresh_does_not_refetch_stored_matches(
    async_client, riot_api, puuid, match_detail, make_record
):
    riot_api.accounts["Faker#KR1"] = puuid
    riot_api.match_ids[puuid] = ["NA1_1", "KR_9"]
    riot_api.details["KR_9"] = match_detail(puuid, creation=1_800_000_000_000)
    await Player.objects.acreate(puuid=puuid, last_refreshed_at=timezone.now() - timedelta(hours=2))
    await make_record(1).asave()

    response = await async_client.get(stats_url())

    assert response.status_code == 200
    assert [m["match_id"] for m in response.json()["matches"]] == ["KR_9", "NA1_1"]
    assert riot_api.paths("/NA1_1") == []
    player = await Player.objects.aget(puuid=puuid)
    assert timezone.now() - player.last_refreshed_at < timedelta(minutes=1)


@pytest.mark.django_db(transaction=True)
async def test_no_matches_returns_message(async_client, riot_api, puuid):
    riot_api.accounts["Faker#KR1"] = puuid

    response = await async_client.get(stats_url())

    assert response.status_code == 200
    assert response.json() == {
        "message": "No matches found for this player",
        "matches": [],
        "overallWins": 0,
        "overallLosses": 0,
        "championWinRates": [],
    }


@pytest.mark.django_db(transaction=True)
async def test_failed_match_detail_is_skipped(async_client, riot_api, puuid, match_detail):
    riot_api.accounts["Faker#KR1"] = puuid
    riot_api.match_ids[puuid] = ["KR_1", "KR_2", "KR_3"]
    riot_api.details["KR_1"] = match_detail(puuid)
    riot_api.details["KR_3"] = match_detail(puuid)

    response = await async_client.get(stats_url())

    assert response.status_code == 200
    assert sorted(m["match_id"] for m in response.json()["matches"]) == ["KR_1", "KR_3"]


@pytest.mark.django_db(transaction=True)
async def test_unknown_riot_id_is_404(async_client):
    response = await async_client.get(stats_url(game_name="Nobody"))

    assert response.status_code == 404
    assert response.json() == {"error": "Player not found. Check username, tagline, and region"}


@pytest.mark.django_db(transaction=True)
async def test_missing_api_key_is_500(async_client, settings, riot_api):
    settings.RIOT_API_CONFIG = RiotApiSettings(API_KEY=None)

    response = await async_client.get(stats_url())

    assert response.status_code == 500
    assert response.json() == {"error": "Riot API key is not set"}
    assert riot_api.requests == []


@pytest.mark.django_db(transaction=True)
async def test_upstream_failure_is_500(async_client, monkeypatch):
    def broken(request):
        raise httpx.ConnectError("connection refused", request=request)

    monkeypatch.setattr(
        PlayerStatsView,
        "service_factory",
        staticmethod(
            lambda: PlayerStatsService(
                client=RiotApiClient(session=httpx.AsyncClient(transport=httpx.MockTransport(broken))),
                store=DjangoStatsStore(),
            )
        ),
    )

    response = await async_client.get(stats_url())

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch player puuid from Riot API"}


async def test_post_is_not_allowed(async_client):
    response = await async_client.post(stats_url())

    assert response.status_code == 405
    assert "error" in response.json()


async def test_unknown_url_returns_json_404(async_client):
    response = await async_client.get("/api/player/Faker/KR1")

    assert response.status_code == 404
    assert response.json() == {"error": "The requested endpoint was not found."}


@pytest.mark.django_db(transaction=True)
async def test_store_read_failure_is_500(async_client, monkeypatch, riot_api, puuid):
    riot_api.accounts["Faker#KR1"] = puuid

    async def broken_get_player(self, puuid):
        raise StoreError

    monkeypatch.setattr(DjangoStatsStore, "get_player", broken_get_player)

    response = await async_client.get(stats_url())

    assert response.status_code == 500
    assert response.json() == {"error": "Database error"}
