# apps/players/urls.py
# ================================================================================
from __future__ import annotations

from django.urls import path

from .views import PlayerStatsView

app_name = "players"

urlpatterns = [
    path("<str:game_name>/<str:tag_line>/<str:region>/stats", PlayerStatsView.as_view(), name="player-stats"),
]
