"""Use case: the match history held by one open history screen."""
from __future__ import annotations

from typing import List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import MatchSummary, PlayerContext
from domain.statistics import AggregateStats, aggregate
from application.services.match_history_service import MatchHistoryService

logger = get_logger(__name__, service="history")


class MatchHistorySession:
    """
    In-memory match list for one player, alive as long as its screen.

    ``load`` replaces the list with the first page; ``load_more`` asks for
    the next ``increment`` ids starting at the current list length and
    appends whatever comes back. Pages are not de-duplicated against each
    other, so two overlapping loads can hold the same match twice.
    """

    def __init__(
        self,
        service: MatchHistoryService,
        context: PlayerContext,
        page_size: Optional[int] = None,
    ):
        self.service = service
        self.context = context
        self.page_size = page_size or settings.HISTORY_PAGE_SIZE
        self.matches: List[MatchSummary] = []
        self.games = self.page_size

    @property
    def routing(self):
        return self.context.region.routing_region

    async def load(self) -> List[MatchSummary]:
        self.matches = await self.service.load_page(
            self.context.puuid, self.routing, start=0, count=self.page_size
        )
        self.games = self.page_size
        return self.matches

    async def load_more(self, increment: Optional[int] = None) -> List[MatchSummary]:
        """Fetch the next page and append it; returns only the new matches."""
        increment = settings.LOAD_MORE_INCREMENT if increment is None else increment
        new_matches = await self.service.load_page(
            self.context.puuid, self.routing, start=len(self.matches), count=increment
        )
        self.matches.extend(new_matches)
        self.games += increment
        logger.debug(f"load-more +{len(new_matches)} total={len(self.matches)}")
        return new_matches

    @property
    def stats(self) -> AggregateStats:
        return aggregate(self.matches)
