"""Data Dragon reference entities."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChampionInfo:
    id: str         # "MonkeyKing"
    key: int        # numeric champion id
    name: str       # "Wukong"
    title: str
    tags: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ItemInfo:
    id: int
    name: str
    gold_total: int
    tags: tuple[str, ...] = field(default_factory=tuple)
