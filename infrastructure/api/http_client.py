"""Single-GET JSON fetcher shared by the Riot and Data Dragon clients."""
import logging
from typing import Any, Dict, Optional

import httpx

from domain.errors import DecodeError, EmptyBody, HttpStatusError, NetworkError

logger = logging.getLogger(__name__)


class JsonHttpClient:
    """Asynchronous JSON-over-HTTP client.

    ``fetch_json`` issues exactly one GET and either returns the decoded body
    or raises a ``FetchError`` subclass. It never retries; redirects and
    timeouts follow httpx defaults apart from the configured timeout.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        params: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._params = params or {}
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self.session = httpx.AsyncClient(
            timeout=self.timeout,
            params=self._params,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        if self.session:
            await self.session.aclose()
            self.session = None

    async def _before_request(self, url: httpx.URL) -> None:
        """Hook run before each request (rate limiting)."""

    async def fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        if self.session is None:
            raise RuntimeError(f"{type(self).__name__} must be used as an async context manager")

        await self._before_request(httpx.URL(url))

        try:
            response = await self.session.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.error(f"Network error for {url}: {exc!r}")
            raise NetworkError(str(exc) or type(exc).__name__, url=url, cause=exc) from exc

        if response.status_code in (401, 403):
            logger.error(f"{response.status_code} from {url}, check RIOT_API_KEY")
        elif response.status_code == 429:
            logger.warning(f"429 rate-limited on {url} (Retry-After={response.headers.get('Retry-After')})")

        if not response.is_success:
            raise HttpStatusError(response.status_code, url=url)

        if not response.content.strip():
            raise EmptyBody(url=url)

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"invalid JSON from {url}: {exc}", url=url, cause=exc) from exc
