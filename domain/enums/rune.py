"""Rune (perk) id → name lookup."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Rune:
    """One rune selection. ``name`` is "" when the id is not in the table."""

    id: int
    name: str

    @property
    def is_known(self) -> bool:
        return bool(self.name)


RUNE_NAMES: dict[int, str] = {
    # Trees
    8000: "Precision",
    8100: "Domination",
    8200: "Sorcery",
    8300: "Inspiration",
    8400: "Resolve",

    # Precision
    8005: "Press the Attack",
    8008: "Lethal Tempo",
    8010: "Conqueror",
    8021: "Fleet Footwork",
    8009: "Presence of Mind",
    9101: "Absorb Life",
    9111: "Triumph",
    9103: "Legend: Bloodline",
    9104: "Legend: Alacrity",
    9105: "Legend: Haste",
    8014: "Coup de Grace",
    8017: "Cut Down",
    8299: "Last Stand",

    # Domination
    8112: "Electrocute",
    8128: "Dark Harvest",
    9923: "Hail of Blades",
    8126: "Cheap Shot",
    8139: "Taste of Blood",
    8143: "Sudden Impact",
    8136: "Zombie Ward",
    8120: "Ghost Poro",
    8138: "Eyeball Collection",
    8140: "Grisly Mementos",
    8141: "Deep Ward",
    8137: "Sixth Sense",
    8135: "Treasure Hunter",
    8105: "Relentless Hunter",
    8106: "Ultimate Hunter",

    # Sorcery
    8214: "Summon Aery",
    8229: "Arcane Comet",
    8230: "Phase Rush",
    8224: "Nullifying Orb",
    8226: "Manaflow Band",
    8275: "Nimbus Cloak",
    8210: "Transcendence",
    8234: "Celerity",
    8233: "Absolute Focus",
    8237: "Scorch",
    8232: "Waterwalking",
    8236: "Gathering Storm",

    # Inspiration
    8351: "Glacial Augment",
    8360: "Unsealed Spellbook",
    8369: "First Strike",
    8306: "Hextech Flashtraption",
    8304: "Magical Footwear",
    8321: "Cash Back",
    8313: "Triple Tonic",
    8352: "Time Warp Tonic",
    8345: "Biscuit Delivery",
    8347: "Cosmic Insight",
    8410: "Approach Velocity",
    8316: "Jack Of All Trades",

    # Resolve
    8437: "Grasp of the Undying",
    8439: "Aftershock",
    8465: "Guardian",
    8446: "Demolish",
    8463: "Font of Life",
    8401: "Shield Bash",
    8429: "Conditioning",
    8444: "Second Wind",
    8473: "Bone Plating",
    8451: "Overgrowth",
    8453: "Revitalize",
    8242: "Unflinching",
}


def rune_name(rune_id: int) -> str:
    return RUNE_NAMES.get(rune_id, "")


def make_rune(rune_id: int) -> Rune:
    return Rune(id=rune_id, name=rune_name(rune_id))
