# apps/core/services/riot_client.py
# ==============================================================================
"""
Async client for the three Riot endpoints the stats pipeline consumes:
account lookup by Riot ID, recent match ids, and match detail.

Requests are routed to the regional cluster owning the player's platform
region. No retries are performed; every failure is mapped onto the domain
error taxonomy and left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Self
from urllib.parse import quote

import httpx
import structlog
from django.conf import settings

from apps.core.conf import (
    ACCOUNT_BY_RIOT_ID_PATH,
    DEFAULT_CLUSTER,
    DEFAULT_TIMEOUT_S,
    MATCH_DETAIL_PATH,
    MATCH_IDS_BY_PUUID_PATH,
    MSG_MATCH_FETCH_FAILED,
    MSG_MATCH_IDS_FETCH_FAILED,
    MSG_MISSING_API_KEY,
    MSG_NO_PUUID,
    MSG_PUUID_FETCH_FAILED,
    REGION_CLUSTERS,
    RIOT_HOST_TEMPLATE,
    RIOT_TOKEN_HEADER,
    USER_AGENT,
)
from apps.core.exceptions import IdentityNotFound, MissingCredentialError, UpstreamUnavailable

if TYPE_CHECKING:
    from collections.abc import Mapping

# ─────────────────────────────── constants ────────────────────────────────
log = structlog.get_logger(__name__).bind(component="RiotApiClient")

_CLUSTER_BY_REGION: dict[str, str] = {
    region: cluster for cluster, regions in REGION_CLUSTERS.items() for region in regions
}


def routing_cluster(region: str) -> str:
    """
    Map a platform region (``euw1``, ``kr1`` ...) to its regional cluster.

    Unknown regions fall back to ``DEFAULT_CLUSTER`` instead of failing.
    """
    cluster = _CLUSTER_BY_REGION.get(region.strip().lower())
    if cluster is None:
        log.warning("Unknown region, using default cluster", region=region, cluster=DEFAULT_CLUSTER)
        return DEFAULT_CLUSTER
    return cluster


# ─────────────────────────────── dataclasses ────────────────────────────────
@dataclass(slots=True, frozen=True)
class RiotApiConfig:
    api_key: str | None
    timeout_s: int = DEFAULT_TIMEOUT_S
    match_count: int = 20

    @classmethod
    def from_settings(cls) -> Self:
        cfg = settings.RIOT_API_CONFIG
        return cls(cfg.API_KEY, cfg.TIMEOUT_S, cfg.MATCH_COUNT)

    def check(self) -> None:
        if not self.api_key:
            raise MissingCredentialError(MSG_MISSING_API_KEY)


# ─────────────────────────────── main client ────────────────────────────────
class RiotApiClient:
    """
    1. Resolve a Riot ID to a puuid.
    2. List recent match ids for a puuid.
    3. Fetch full match detail.
    """

    def __init__(
        self,
        *,
        config: RiotApiConfig | None = None,
        session: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config or RiotApiConfig.from_settings()
        self._external_session = session
        self._session: httpx.AsyncClient | None = None

    # ------------------------------------------------------- context manager --
    async def __aenter__(self) -> Self:
        self.config.check()
        self._session = self._external_session or httpx.AsyncClient(
            timeout=self.config.timeout_s,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )
        return self

    async def __aexit__(self, *exc) -> None:
        if not self._external_session and self._session:
            await self._session.aclose()
        self._session = None

    # ------------------------------------------------------- public API -------
    async def resolve_puuid(self, game_name: str, tag_line: str, region: str) -> str:
        path = ACCOUNT_BY_RIOT_ID_PATH.format(
            game_name=quote(game_name, safe=""),
            tag_line=quote(tag_line, safe=""),
        )
        try:
            data = await self._get_json(region, path)
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == httpx.codes.NOT_FOUND:
                log.info("Riot ID not found", riot_id=f"{game_name}#{tag_line}", region=region)
                raise IdentityNotFound from exc
            raise UpstreamUnavailable(MSG_PUUID_FETCH_FAILED) from exc
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailable(MSG_PUUID_FETCH_FAILED) from exc

        puuid = data.get("puuid") if isinstance(data, dict) else None
        if not puuid:
            raise IdentityNotFound(MSG_NO_PUUID)
        return puuid

    async def get_match_ids(self, puuid: str, region: str, *, count: int | None = None) -> list[str]:
        path = MATCH_IDS_BY_PUUID_PATH.format(puuid=quote(puuid, safe=""))
        params = {"start": 0, "count": count or self.config.match_count}
        try:
            data = await self._get_json(region, path, params=params)
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailable(MSG_MATCH_IDS_FETCH_FAILED) from exc

        if not isinstance(data, list):
            raise UpstreamUnavailable(MSG_MATCH_IDS_FETCH_FAILED)
        return [str(match_id) for match_id in data]

    async def get_match(self, match_id: str, region: str) -> dict[str, Any]:
        path = MATCH_DETAIL_PATH.format(match_id=quote(match_id, safe=""))
        try:
            data = await self._get_json(region, path)
        except (httpx.HTTPError, ValueError) as exc:
            raise UpstreamUnavailable(MSG_MATCH_FETCH_FAILED) from exc

        if not isinstance(data, dict):
            raise UpstreamUnavailable(MSG_MATCH_FETCH_FAILED)
        return data

    # ------------------------------------------------------- internals --------
    async def _get_json(
        self,
        region: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        assert self._session, "Session not initialised"

        url = RIOT_HOST_TEMPLATE.format(cluster=routing_cluster(region)) + path
        try:
            resp = await self._session.get(
                url,
                params=params,
                headers={RIOT_TOKEN_HEADER: self.config.api_key or ""},
            )
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as exc:
            log.warning(
                "Riot request rejected",
                path=path,
                status=exc.response.status_code,
                body=exc.response.text[:200],
            )
            raise
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("Riot request failed", path=path, err=str(exc))
            raise
