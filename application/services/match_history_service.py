"""Match history service - list ids, fan out detail fetches, join."""
from __future__ import annotations

import asyncio
from typing import List, Optional, Sequence

from config import settings
from core.logging.context import log_context
from core.logging.logger import get_logger, timed
from domain.entities import MatchDetail, MatchSummary
from domain.enums import Region, RoutingRegion, to_routing_region
from domain.errors import FetchError
from domain.interfaces import IMatchRepository

logger = get_logger(__name__, service="history")


class MatchHistoryService:
    """
    Builds a page of match history for one player.

    Design:
    - One detail request per match id, at most ``max_concurrency`` in flight.
    - The join waits for every request to finish (success or failure).
    - A failed match is logged and left out; the caller only sees a shorter
      page. Results are ordered newest first.
    """

    def __init__(self, match_repo: IMatchRepository, max_concurrency: Optional[int] = None):
        self.match_repo = match_repo
        self.max_concurrency = max(1, max_concurrency or settings.MAX_CONCURRENT_REQUESTS)

    @timed
    async def fetch_history(
        self,
        puuid: str,
        region: 'str | Region | RoutingRegion',
        match_ids: Sequence[str],
    ) -> List[MatchSummary]:
        """Fetch and decode every id; drop failures; sort by ``created_at`` desc."""
        if not match_ids:
            return []

        routing = to_routing_region(region)
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def _fetch(match_id: str) -> MatchSummary:
            async with semaphore:
                with log_context(match_id=match_id):
                    return await self.match_repo.fetch_match(match_id, routing, puuid)

        with log_context(puuid=puuid, region=routing.value):
            results = await asyncio.gather(*(_fetch(mid) for mid in match_ids), return_exceptions=True)

            matches: List[MatchSummary] = []
            for match_id, result in zip(match_ids, results):
                if isinstance(result, FetchError):
                    logger.warning(f"match-dropped {match_id}: {type(result).__name__}: {result}")
                    continue
                if isinstance(result, BaseException):
                    # Anything else is a bug, not a bad match.
                    raise result
                matches.append(result)

            dropped = len(match_ids) - len(matches)
            logger.info(f"history-page requested={len(match_ids)} loaded={len(matches)} dropped={dropped}")

        matches.sort(key=lambda m: m.created_at, reverse=True)
        return matches

    async def load_page(
        self,
        puuid: str,
        region: 'str | Region | RoutingRegion',
        start: int = 0,
        count: Optional[int] = None,
    ) -> List[MatchSummary]:
        """List ``count`` ids from ``start`` and fetch them.

        Errors from the id listing propagate; per-match errors do not.
        """
        count = settings.HISTORY_PAGE_SIZE if count is None else count
        match_ids = await self.match_repo.list_match_ids(puuid, region, start=start, count=count)
        return await self.fetch_history(puuid, region, match_ids)

    async def match_detail(self, match_id: str, region: 'str | Region | RoutingRegion') -> MatchDetail:
        """Full ten-player view of one match; errors propagate."""
        with log_context(match_id=match_id):
            return await self.match_repo.fetch_match_detail(match_id, region)
