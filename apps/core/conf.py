"""Core configuration and constants shared by every app in the project."""

from __future__ import annotations

from typing import Final

# ─── HTTP ───────────────────────────────────────────────────────────────────────

DEFAULT_TIMEOUT_S: Final[int] = 10
USER_AGENT: Final[str] = "lol-stats/0.1 (+https://developer.riotgames.com)"
RIOT_TOKEN_HEADER: Final[str] = "X-Riot-Token"

# ─── Riot routing ───────────────────────────────────────────────────────────────

RIOT_HOST_TEMPLATE: Final[str] = "https://{cluster}.api.riotgames.com"

ACCOUNT_BY_RIOT_ID_PATH: Final[str] = "/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}"
MATCH_IDS_BY_PUUID_PATH: Final[str] = "/lol/match/v5/matches/by-puuid/{puuid}/ids"
MATCH_DETAIL_PATH: Final[str] = "/lol/match/v5/matches/{match_id}"

# Platform region -> regional routing cluster.
REGION_CLUSTERS: Final[dict[str, tuple[str, ...]]] = {
    "americas": ("na1", "br1", "lan1", "las1", "oc1"),
    "europe": ("euw1", "eun1", "tr1", "ru"),
    "asia": ("jp1", "kr1", "ph2", "sg2", "th2", "tw2", "vn2"),
}
DEFAULT_CLUSTER: Final[str] = "americas"

# ─── Public error messages ──────────────────────────────────────────────────────

MSG_MISSING_API_KEY: Final[str] = "Riot API key is not set"
MSG_PLAYER_NOT_FOUND: Final[str] = "Player not found. Check username, tagline, and region"
MSG_NO_PUUID: Final[str] = "Player not found. (No puuid could be retrieved)"
MSG_PUUID_FETCH_FAILED: Final[str] = "Failed to fetch player puuid from Riot API"
MSG_MATCH_IDS_FETCH_FAILED: Final[str] = "Failed to fetch player matches from Riot API"
MSG_MATCH_FETCH_FAILED: Final[str] = "Failed to fetch match details from Riot API"
MSG_DATABASE_ERROR: Final[str] = "Database error"
MSG_CACHED_MATCHES_DB_ERROR: Final[str] = "Database error while fetching cached matches."
MSG_UNEXPECTED: Final[str] = "An unexpected error occurred"
