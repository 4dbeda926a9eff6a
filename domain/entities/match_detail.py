"""Full-match view: every participant and both teams' objectives."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import Role
from .. import statistics


@dataclass
class MatchParticipant:
    """One of the ten players in a match."""

    summoner_name: str
    champion_name: str
    team_id: int
    team_position: str
    kills: int
    deaths: int
    assists: int
    champ_level: int
    damage_to_champions: int
    vision_score: Optional[int]
    gold_earned: int
    creep_score: int
    items: list[int] = field(default_factory=list)
    puuid: str = ""

    @property
    def role(self) -> Optional[Role]:
        return Role.parse(self.team_position)

    @property
    def display_position(self) -> str:
        role = self.role
        return role.display_name if role else self.team_position

    @property
    def kda(self) -> float:
        return statistics.kda(self.kills, self.deaths, self.assists)

    @property
    def performance_score(self) -> float:
        return statistics.performance_score(self)


@dataclass
class TeamSummary:
    """Objectives taken by one side (100 = blue, 200 = red)."""

    team_id: int
    win: bool
    baron_kills: int = 0
    tower_kills: int = 0
    dragon_kills: int = 0


@dataclass
class MatchDetail:
    match_id: str
    queue_id: int
    queue_label: str
    created_at: datetime
    duration_seconds: int
    participants: list[MatchParticipant] = field(default_factory=list)
    teams: list[TeamSummary] = field(default_factory=list)

    @property
    def formatted_duration(self) -> str:
        minutes, seconds = divmod(self.duration_seconds, 60)
        return f"{minutes:02d}:{seconds:02d}"

    @property
    def winning_team(self) -> Optional[TeamSummary]:
        return next((t for t in self.teams if t.win), None)

    def team(self, team_id: int) -> Optional[TeamSummary]:
        return next((t for t in self.teams if t.team_id == team_id), None)

    def participants_for(self, team_id: int) -> list[MatchParticipant]:
        return [p for p in self.participants if p.team_id == team_id]

    def total_performance(self, team_id: int) -> float:
        return sum(p.performance_score for p in self.participants_for(team_id))

    def carry_score(self, participant: MatchParticipant) -> float:
        """Participant's share of their team's performance, in percent."""
        return statistics.carry_score(
            participant.performance_score,
            self.total_performance(participant.team_id),
        )

    def ranked_by_performance(self, team_id: int) -> list[MatchParticipant]:
        return sorted(self.participants_for(team_id), key=lambda p: p.performance_score, reverse=True)
