"""Domain layer - entities, enums, statistics, errors and interfaces."""
from .entities import (
    Account,
    MatchDetail,
    MatchParticipant,
    MatchSummary,
    PlayerContext,
    RankedStanding,
    SummonerProfile,
    TeamSummary,
)
from .enums import QueueKind, Rank, Region, Role, RoutingRegion, to_routing_region
from .errors import (
    DecodeError,
    EmptyBody,
    FetchError,
    HttpStatusError,
    InvalidRiotIdError,
    NetworkError,
    ParticipantNotFound,
    RiftError,
    UnsupportedRegionError,
)
from .interfaces import IAccountRepository, IMatchRepository
from .statistics import AggregateStats

__all__ = [
    # Entities
    'Account',
    'MatchDetail',
    'MatchParticipant',
    'MatchSummary',
    'PlayerContext',
    'RankedStanding',
    'SummonerProfile',
    'TeamSummary',
    'AggregateStats',
    # Enums
    'QueueKind',
    'Rank',
    'Region',
    'Role',
    'RoutingRegion',
    'to_routing_region',
    # Errors
    'RiftError',
    'FetchError',
    'NetworkError',
    'HttpStatusError',
    'EmptyBody',
    'DecodeError',
    'ParticipantNotFound',
    'UnsupportedRegionError',
    'InvalidRiotIdError',
    # Interfaces
    'IAccountRepository',
    'IMatchRepository',
]
