"""Domain enumerations and static lookups."""
from .region import Region, RoutingRegion, to_routing_region
from .queue_type import QueueKind, queue_label
from .rank import Rank
from .role import Role
from .rune import Rune, make_rune, rune_name
from .summoner_spell import SummonerSpell, summoner_spell_name

__all__ = [
    'Region',
    'RoutingRegion',
    'to_routing_region',
    'QueueKind',
    'queue_label',
    'Rank',
    'Role',
    'Rune',
    'make_rune',
    'rune_name',
    'SummonerSpell',
    'summoner_spell_name',
]
