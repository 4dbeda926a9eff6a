"""Account / summoner repository implementation."""
import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from domain.entities import Account, RankedStanding, SummonerProfile
from domain.enums import Rank, Region, RoutingRegion, to_routing_region
from domain.errors import DecodeError, FetchError
from domain.interfaces import IAccountRepository
from infrastructure.api import RiotAPIClient
from infrastructure.api.schemas import AccountDto, LeagueEntryDto, SummonerDto

logger = logging.getLogger(__name__)

SOLO_QUEUE = 'RANKED_SOLO_5x5'

_league_entries = TypeAdapter(list[LeagueEntryDto])


class AccountRepository(IAccountRepository):
    """Repository for account and summoner data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        self.api_client = api_client

    async def resolve_riot_id(
        self,
        game_name: str,
        tag_line: str,
        region: 'str | Region | RoutingRegion',
    ) -> Account:
        """
        Resolve ``game_name#tag_line`` to an account.

        Args:
            game_name: Riot ID name part
            tag_line: Riot ID tag part (without '#')
            region: Display region, platform code or routing region

        Raises:
            UnsupportedRegionError: region has no routing region
            FetchError: request failed or no puuid in the response
        """
        routing = to_routing_region(region)
        data = await self.api_client.get_account_by_riot_id(routing, game_name, tag_line)
        try:
            dto = AccountDto.model_validate(data)
        except ValidationError as exc:
            raise DecodeError("PUUID not found in response.", cause=exc) from exc
        return Account(
            puuid=dto.puuid,
            game_name=dto.gameName or game_name,
            tag_line=dto.tagLine or tag_line,
        )

    async def get_profile(self, puuid: str, region: Region) -> SummonerProfile:
        """
        Get summoner level, icon and solo-queue standing.

        A failed league lookup leaves the player unranked rather than
        failing the profile.
        """
        data = await self.api_client.get_summoner_by_puuid(region, puuid)
        try:
            summoner = SummonerDto.model_validate(data)
        except ValidationError as exc:
            raise DecodeError("Invalid summoner data format.", cause=exc) from exc

        try:
            solo_rank = await self.get_solo_rank(puuid, region)
        except FetchError as exc:
            logger.warning(f"Rank lookup failed for {puuid}: {exc}")
            solo_rank = None

        return SummonerProfile(
            puuid=summoner.puuid,
            level=summoner.summonerLevel,
            profile_icon_id=summoner.profileIconId,
            solo_rank=solo_rank,
        )

    async def get_solo_rank(self, puuid: str, region: Region) -> Optional[RankedStanding]:
        data = await self.api_client.get_league_entries_by_puuid(region, puuid)
        try:
            entries = _league_entries.validate_python(data)
        except ValidationError as exc:
            raise DecodeError("Invalid rank data format.", cause=exc) from exc

        for entry in entries:
            if entry.queueType == SOLO_QUEUE:
                return RankedStanding(
                    queue_type=entry.queueType,
                    tier=Rank.from_string(entry.tier),
                    division=entry.rank,
                    league_points=entry.leaguePoints,
                    wins=entry.wins,
                    losses=entry.losses,
                )
        return None
