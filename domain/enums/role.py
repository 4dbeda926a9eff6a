"""Role/Position enumeration."""
from enum import Enum
from typing import Optional


class Role(Enum):
    """League of Legends lane roles/positions."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"  # Support

    @property
    def display_name(self) -> str:
        names = {
            "TOP": "Toplane",
            "JUNGLE": "Jungle",
            "MIDDLE": "Midlane",
            "BOTTOM": "Botlane",
            "UTILITY": "Support",
        }
        return names[self.value]

    @classmethod
    def parse(cls, role_str: Optional[str]) -> Optional['Role']:
        """Role for a ``teamPosition`` / ``individualPosition`` value.

        Returns None for "", "Invalid" and anything unrecognised: remakes and
        ARAM games carry no position.
        """
        if not role_str:
            return None
        key = role_str.strip().upper()
        try:
            return cls[key]
        except KeyError:
            aliases = {
                "SUPPORT": cls.UTILITY,
                "SUP": cls.UTILITY,
                "ADC": cls.BOTTOM,
                "BOT": cls.BOTTOM,
                "MID": cls.MIDDLE,
                "JG": cls.JUNGLE,
            }
            return aliases.get(key)
