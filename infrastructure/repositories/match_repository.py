"""Match repository implementation."""
import logging
from typing import List

from domain.entities import MatchDetail, MatchSummary
from domain.enums import Region, RoutingRegion, to_routing_region
from domain.errors import DecodeError
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient
from .match_parser import parse_match_detail, parse_match_summary

logger = logging.getLogger(__name__)

# match-v5 refuses larger pages.
MAX_IDS_PER_REQUEST = 100


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance (already entered)
        """
        self.api_client = api_client

    async def list_match_ids(
        self,
        puuid: str,
        region: 'str | Region | RoutingRegion',
        start: int = 0,
        count: int = 10,
    ) -> List[str]:
        """
        Get match IDs for a player, in the API's order (most recent first).

        Args:
            puuid: Player UUID
            region: Display region, platform code or routing region
            start: Offset into the player's history
            count: Page size

        Raises:
            UnsupportedRegionError: region has no routing region
            FetchError: the request failed or the body is not a list of ids
        """
        routing = to_routing_region(region)
        result = await self.api_client.get_match_ids_by_puuid(
            routing,
            puuid,
            start=max(0, start),
            count=max(0, min(count, MAX_IDS_PER_REQUEST)),
        )
        if not isinstance(result, list) or not all(isinstance(mid, str) for mid in result):
            raise DecodeError(f"expected a list of match ids, got {type(result).__name__}")
        return result

    async def fetch_match(
        self,
        match_id: str,
        region: 'str | Region | RoutingRegion',
        puuid: str,
    ) -> MatchSummary:
        """
        Fetch one match and reduce it to the player's line.

        Raises:
            FetchError: transport / status / body failure
            ParticipantNotFound: ``puuid`` did not play in this match
        """
        routing = to_routing_region(region)
        document = await self.api_client.get_match(routing, match_id)
        return parse_match_summary(document, puuid)

    async def fetch_match_detail(
        self,
        match_id: str,
        region: 'str | Region | RoutingRegion',
    ) -> MatchDetail:
        routing = to_routing_region(region)
        document = await self.api_client.get_match(routing, match_id)
        return parse_match_detail(document)
