"""MatchSummary entity: one match as seen by one player."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..assets import champion_icon_url, item_icon_url
from ..enums import QueueKind, Rune
from .. import statistics


@dataclass
class MatchSummary:
    """A match document reduced to the target player's line.

    Built only from a document that contains the player; there is no
    partially filled summary.
    """

    # Identity
    match_id: str
    puuid: str

    # Outcome
    champion_name: str
    kills: int
    deaths: int
    assists: int
    is_win: bool

    # Match context
    queue_id: int
    queue_kind: QueueKind
    created_at: datetime  # UTC, from info.gameCreation
    duration_seconds: int

    # Build
    items: list[int] = field(default_factory=list)         # slot order, empties and wards removed
    vision_items: list[int] = field(default_factory=list)  # wards / trinkets
    summoner_spells: list[str] = field(default_factory=list)
    keystone: Optional[Rune] = None
    secondary_runes: list[Rune] = field(default_factory=list)

    # Stats
    damage_to_champions: int = 0
    vision_score: Optional[int] = None  # None for ARAM or when absent
    creep_score: int = 0                # lane minions + neutral monsters
    gold_earned: int = 0
    lane: str = ""

    @property
    def kda(self) -> float:
        return statistics.kda(self.kills, self.deaths, self.assists)

    @property
    def cs_per_minute(self) -> float:
        return statistics.cs_per_minute(self.creep_score, self.duration_seconds)

    @property
    def performance_score(self) -> float:
        return statistics.performance_score(self)

    @property
    def formatted_duration(self) -> str:
        minutes, seconds = divmod(self.duration_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def score_line(self) -> str:
        return f"{self.kills}/{self.deaths}/{self.assists}"

    def champion_icon_url(self, version: str) -> str:
        return champion_icon_url(self.champion_name, version)

    def item_icon_urls(self, version: str) -> list[str]:
        return [item_icon_url(item_id, version) for item_id in self.items]

    def to_dict(self) -> dict:
        return {
            'match_id': self.match_id,
            'puuid': self.puuid,
            'champion_name': self.champion_name,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kda': round(self.kda, 2),
            'win': self.is_win,
            'queue_id': self.queue_id,
            'queue_kind': self.queue_kind.value,
            'created_at': self.created_at.isoformat(),
            'duration_seconds': self.duration_seconds,
            'items': list(self.items),
            'vision_items': list(self.vision_items),
            'summoner_spells': list(self.summoner_spells),
            'keystone': self.keystone.name if self.keystone else None,
            'secondary_runes': [r.name for r in self.secondary_runes],
            'damage_to_champions': self.damage_to_champions,
            'vision_score': self.vision_score,
            'creep_score': self.creep_score,
            'cs_per_minute': round(self.cs_per_minute, 1),
            'gold_earned': self.gold_earned,
            'lane': self.lane,
        }
