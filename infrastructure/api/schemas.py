"""Wire schemas for Riot API and Data Dragon documents.

Only the fields the application reads are declared; unknown keys are
ignored so new fields added by Riot never break decoding. Fields the
match-history screen cannot do without are declared with ``Strict*`` types:
a missing or mistyped value fails validation instead of being coerced.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class _Base(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ── match-v5 ─────────────────────────────────────────────────────────────

class MetadataDto(_Base):
    matchId: StrictStr


class InfoDto(_Base):
    queueId: StrictInt
    gameCreation: StrictInt  # epoch milliseconds
    gameDuration: StrictInt  # seconds
    # Entries stay untyped and are decoded one at a time, so a malformed or
    # non-object entry only matters when it belongs to the player looked at.
    participants: List[Any]
    teams: List[Any] = Field(default_factory=list)


class MatchDto(_Base):
    metadata: MetadataDto
    info: InfoDto


class PerkSelectionDto(_Base):
    perk: StrictInt


class PerkStyleDto(_Base):
    style: int = 0
    selections: List[PerkSelectionDto] = Field(default_factory=list)


class PerksDto(_Base):
    styles: List[PerkStyleDto] = Field(default_factory=list)


class ParticipantDto(_Base):
    puuid: StrictStr
    championName: StrictStr
    kills: StrictInt
    deaths: StrictInt
    assists: StrictInt
    win: StrictBool

    item0: StrictInt
    item1: StrictInt
    item2: StrictInt
    item3: StrictInt
    item4: StrictInt
    item5: StrictInt
    item6: StrictInt

    summoner1Id: StrictInt
    summoner2Id: StrictInt

    individualPosition: StrictStr
    totalDamageDealtToChampions: StrictInt
    totalMinionsKilled: StrictInt
    neutralMinionsKilled: StrictInt

    # Optional / soft fields
    visionScore: Optional[StrictInt] = None
    goldEarned: int = 0
    teamId: int = 0
    teamPosition: str = ""
    champLevel: int = 0
    summonerName: str = ""
    riotIdGameName: Optional[str] = None
    perks: Any = None  # decoded leniently, see match_parser.parse_runes

    @property
    def item_ids(self) -> List[int]:
        return [self.item0, self.item1, self.item2, self.item3, self.item4, self.item5, self.item6]

    @property
    def creep_score(self) -> int:
        return self.totalMinionsKilled + self.neutralMinionsKilled

    @property
    def display_name(self) -> str:
        return self.riotIdGameName or self.summonerName


class ObjectiveDto(_Base):
    kills: int = 0
    first: bool = False


class ObjectivesDto(_Base):
    baron: ObjectiveDto = Field(default_factory=ObjectiveDto)
    tower: ObjectiveDto = Field(default_factory=ObjectiveDto)
    dragon: ObjectiveDto = Field(default_factory=ObjectiveDto)


class TeamDto(_Base):
    teamId: StrictInt
    win: bool = False
    objectives: ObjectivesDto = Field(default_factory=ObjectivesDto)


# ── account-v1 / summoner-v4 / league-v4 ─────────────────────────────────

class AccountDto(_Base):
    puuid: StrictStr
    gameName: Optional[str] = None
    tagLine: Optional[str] = None


class SummonerDto(_Base):
    puuid: StrictStr
    summonerLevel: StrictInt
    profileIconId: StrictInt


class LeagueEntryDto(_Base):
    queueType: StrictStr
    tier: str = ""
    rank: str = ""
    leaguePoints: int = 0
    wins: int = 0
    losses: int = 0


# ── Data Dragon ──────────────────────────────────────────────────────────

class ChampionDto(_Base):
    id: StrictStr
    key: str
    name: StrictStr
    title: str = ""
    tags: List[str] = Field(default_factory=list)


class ChampionListDto(_Base):
    version: str = ""
    data: Dict[str, ChampionDto]


class ItemGoldDto(_Base):
    total: int = 0


class ItemDto(_Base):
    name: StrictStr
    gold: ItemGoldDto = Field(default_factory=ItemGoldDto)
    tags: List[str] = Field(default_factory=list)


class ItemListDto(_Base):
    version: str = ""
    data: Dict[str, ItemDto]
