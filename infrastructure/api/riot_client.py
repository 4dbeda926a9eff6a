"""Riot Games API client."""
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from config import settings
from domain.enums import Region, RoutingRegion
from .http_client import JsonHttpClient
from .rate_limiter import HostRateLimiter

logger = logging.getLogger(__name__)


class RiotAPIClient(JsonHttpClient):
    """Asynchronous Riot API client.

    The API key travels as the ``api_key`` query parameter. Requests are
    paced per host by a two-window rate limiter; nothing is retried.
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[HostRateLimiter] = None,
    ):
        super().__init__(
            timeout=settings.REQUEST_TIMEOUT if timeout is None else timeout,
            params={"api_key": api_key},
            transport=transport,
        )
        self.api_key = api_key
        self.rate_limiter = rate_limiter or HostRateLimiter(
            requests_per_1_sec=settings.RATE_LIMIT_PER_1_SEC,
            requests_per_2_min=settings.RATE_LIMIT_PER_2_MIN,
        )

    async def _before_request(self, url: httpx.URL) -> None:
        await self.rate_limiter.acquire(url.host)

    @staticmethod
    def _regional_url(routing: RoutingRegion) -> str:
        return f"https://{routing.host}"

    @staticmethod
    def _platform_url(region: Region) -> str:
        return f"https://{region.platform_host}"

    # ── Match API ──────────────────────────────────────────────────────

    async def get_match_ids_by_puuid(
        self,
        routing: RoutingRegion,
        puuid: str,
        start: int = 0,
        count: int = 10,
    ) -> Any:
        url = f"{self._regional_url(routing)}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        return await self.fetch_json(url, params={"start": start, "count": count})

    async def get_match(self, routing: RoutingRegion, match_id: str) -> Any:
        return await self.fetch_json(f"{self._regional_url(routing)}/lol/match/v5/matches/{match_id}")

    # ── Account API ────────────────────────────────────────────────────

    async def get_account_by_riot_id(self, routing: RoutingRegion, game_name: str, tag_line: str) -> Any:
        name = quote(game_name, safe="")
        tag = quote(tag_line, safe="")
        return await self.fetch_json(
            f"{self._regional_url(routing)}/riot/account/v1/accounts/by-riot-id/{name}/{tag}"
        )

    # ── Summoner / League API ──────────────────────────────────────────

    async def get_summoner_by_puuid(self, region: Region, puuid: str) -> Any:
        return await self.fetch_json(f"{self._platform_url(region)}/lol/summoner/v4/summoners/by-puuid/{puuid}")

    async def get_league_entries_by_puuid(self, region: Region, puuid: str) -> Any:
        return await self.fetch_json(f"{self._platform_url(region)}/lol/league/v4/entries/by-puuid/{puuid}")
