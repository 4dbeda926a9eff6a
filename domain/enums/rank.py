"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Rank(Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_string(cls, rank_str: Optional[str]) -> Optional['Rank']:
        try:
            return cls[(rank_str or "").upper()]
        except KeyError:
            return None
