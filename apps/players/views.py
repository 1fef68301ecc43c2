# apps/players/views.py
# ======================================================================
"""Asynchronous API views for the 'players' application."""

from __future__ import annotations

import structlog
from django.http import HttpRequest, HttpResponse

from common.views_utils import BaseAsyncView, OrjsonResponse

from .services.player_stats_service import PlayerStatsService

log = structlog.get_logger(__name__).bind(component="PlayersViews")


class PlayerStatsView(BaseAsyncView):
    """GET /api/player/{gameName}/{tagLine}/{region}/stats – recent matches and aggregates."""

    service_factory = staticmethod(PlayerStatsService.from_settings)

    async def get(self, request: HttpRequest, game_name: str, tag_line: str, region: str) -> HttpResponse:
        with structlog.contextvars.bound_contextvars(riot_id=f"{game_name}#{tag_line}", region=region):
            async with self.service_factory() as service:
                payload = await service.get_player_stats(game_name, tag_line, region)
        return OrjsonResponse(payload)
