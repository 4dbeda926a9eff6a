"""Summoner spell (ability) id → name lookup."""
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class SummonerSpell(Enum):
    """Summoner spells by their ``summoner1Id`` / ``summoner2Id`` value."""

    CLEANSE = 1
    EXHAUST = 3
    FLASH = 4
    GHOST = 6
    HEAL = 7
    SMITE = 11
    TELEPORT = 12
    CLARITY = 13
    IGNITE = 14
    BARRIER = 21
    SNOWBALL = 32      # ARAM "Mark"
    PLACEHOLDER = 54   # not yet picked / arena slot

    @property
    def spell_name(self) -> str:
        return self.name.capitalize()


def summoner_spell_name(spell_id: int) -> str:
    """Display name for a spell id; unknown ids give "" and a warning."""
    try:
        return SummonerSpell(spell_id).spell_name
    except ValueError:
        logger.warning(f"Unknown summoner spell id: {spell_id}")
        return ""
