"""Data Dragon (static game data CDN) client."""
from typing import Any, Optional

import httpx

from config import settings
from .http_client import JsonHttpClient


class DataDragonClient(JsonHttpClient):
    """Champion and item reference documents for one game version."""

    def __init__(
        self,
        version: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        locale: str = "en_US",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            timeout=settings.REQUEST_TIMEOUT if timeout is None else timeout,
            transport=transport,
        )
        self.version = version or settings.DDRAGON_VERSION
        self.base_url = (base_url or settings.DDRAGON_BASE_URL).rstrip("/")
        self.locale = locale

    def _data_url(self, document: str) -> str:
        return f"{self.base_url}/cdn/{self.version}/data/{self.locale}/{document}"

    async def get_champions(self) -> Any:
        return await self.fetch_json(self._data_url("champion.json"))

    async def get_items(self) -> Any:
        return await self.fetch_json(self._data_url("item.json"))
