"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import Account, MatchDetail, MatchSummary, SummonerProfile
from ..enums import Region, RoutingRegion


class IMatchRepository(ABC):
    """Interface for match data repository."""

    @abstractmethod
    async def list_match_ids(
        self,
        puuid: str,
        region: 'str | Region | RoutingRegion',
        start: int = 0,
        count: int = 10,
    ) -> List[str]:
        """Match ids for a player, most recent first."""

    @abstractmethod
    async def fetch_match(
        self,
        match_id: str,
        region: 'str | Region | RoutingRegion',
        puuid: str,
    ) -> MatchSummary:
        """One match reduced to ``puuid``'s line."""

    @abstractmethod
    async def fetch_match_detail(
        self,
        match_id: str,
        region: 'str | Region | RoutingRegion',
    ) -> MatchDetail:
        """Every participant and team of one match."""


class IAccountRepository(ABC):
    """Interface for account/summoner lookups."""

    @abstractmethod
    async def resolve_riot_id(
        self,
        game_name: str,
        tag_line: str,
        region: 'str | Region | RoutingRegion',
    ) -> Account:
        """Resolve ``game_name#tag_line`` to an account."""

    @abstractmethod
    async def get_profile(self, puuid: str, region: Region) -> SummonerProfile:
        """Level, icon and solo-queue rank of a player."""
