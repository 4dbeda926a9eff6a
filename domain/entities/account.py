"""Player identity and profile entities."""
from dataclasses import dataclass
from typing import Optional

from ..assets import profile_icon_url
from ..enums import Rank, Region


@dataclass(frozen=True)
class Account:
    """A Riot account resolved from ``gameName#tagLine``."""

    puuid: str
    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


@dataclass(frozen=True)
class PlayerContext:
    """The player a screen is showing, passed explicitly between use cases."""

    account: Account
    region: Region

    @property
    def puuid(self) -> str:
        return self.account.puuid


@dataclass
class RankedStanding:
    """One ranked queue entry from league-v4."""

    queue_type: str
    tier: Optional[Rank]
    division: str
    league_points: int
    wins: int
    losses: int

    @property
    def display(self) -> str:
        tier = self.tier.display_name if self.tier else "Unknown"
        return f"{tier} {self.division} ({self.league_points} LP)"

    @property
    def win_rate(self) -> float:
        total = self.wins + self.losses
        if total == 0:
            return 0.0
        return (self.wins / total) * 100


@dataclass
class SummonerProfile:
    """Summoner level, icon and solo-queue standing."""

    puuid: str
    level: int
    profile_icon_id: int
    solo_rank: Optional[RankedStanding] = None

    @property
    def rank_display(self) -> str:
        return self.solo_rank.display if self.solo_rank else "Unranked"

    def icon_url(self, version: str) -> str:
        return profile_icon_url(self.profile_icon_id, version)
