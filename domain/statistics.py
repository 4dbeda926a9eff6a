"""Derived match statistics.

Pure, synchronous functions over already-decoded matches. Nothing here is
cached: callers re-run them whenever the held collection changes.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, Sequence


class HasOutcome(Protocol):
    champion_name: str
    is_win: bool


class HasScoreLine(Protocol):
    kills: int
    deaths: int
    assists: int
    damage_to_champions: int
    vision_score: Optional[int]
    gold_earned: int


@dataclass(frozen=True)
class AggregateStats:
    """Summary over the matches currently held by a history screen."""

    matches_played: int
    wins: int
    win_rate: Optional[float]
    most_winning_champion: Optional[tuple[str, int]]

    @property
    def losses(self) -> int:
        return self.matches_played - self.wins


def kda(kills: int, deaths: int, assists: int) -> float:
    """(K + A) / max(1, D).

    A deathless game is scored as if the player died once, so a perfect
    3/0/2 reads 5.0 rather than infinity.
    """
    return (kills + assists) / max(1, deaths)


def cs_per_minute(creep_score: int, duration_seconds: int) -> float:
    if duration_seconds <= 0:
        return 0.0
    return creep_score / (duration_seconds / 60.0)


def performance_score(player: HasScoreLine) -> float:
    """Ad hoc weighted composite used to rank teammates within one match.

    Not comparable across matches.
    """
    return (
        kda(player.kills, player.deaths, player.assists) * 1.0
        + player.damage_to_champions * 0.001
        + (player.vision_score or 0) * 0.1
        + player.gold_earned * 0.001
    )


def carry_score(score: float, team_total: float) -> float:
    """Share of the team's summed performance score, in percent."""
    if team_total <= 0:
        return 0.0
    return score / team_total * 100


def win_rate(matches: Sequence[HasOutcome]) -> Optional[float]:
    """Percentage of wins, or None when there are no matches."""
    if not matches:
        return None
    wins = sum(1 for m in matches if m.is_win)
    return wins / len(matches) * 100


def most_winning_champion(matches: Iterable[HasOutcome]) -> Optional[tuple[str, int]]:
    """Champion with the most wins and its win count.

    Losses do not count towards any champion. Ties go to the champion whose
    name sorts first, so the result does not depend on match order.
    """
    wins = Counter(m.champion_name for m in matches if m.is_win)
    if not wins:
        return None
    champion, count = min(wins.items(), key=lambda item: (-item[1], item[0]))
    return champion, count


def aggregate(matches: Sequence[HasOutcome]) -> AggregateStats:
    return AggregateStats(
        matches_played=len(matches),
        wins=sum(1 for m in matches if m.is_win),
        win_rate=win_rate(matches),
        most_winning_champion=most_winning_champion(matches),
    )
