"""Domain entities."""
from .match_summary import MatchSummary
from .match_detail import MatchDetail, MatchParticipant, TeamSummary
from .account import Account, PlayerContext, RankedStanding, SummonerProfile
from .static_data import ChampionInfo, ItemInfo

__all__ = [
    'MatchSummary',
    'MatchDetail',
    'MatchParticipant',
    'TeamSummary',
    'Account',
    'PlayerContext',
    'RankedStanding',
    'SummonerProfile',
    'ChampionInfo',
    'ItemInfo',
]
