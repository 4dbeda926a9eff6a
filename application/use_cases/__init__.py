"""Application use cases."""
from .search_player import SearchPlayerUseCase, parse_riot_id
from .match_history import MatchHistorySession

__all__ = [
    'SearchPlayerUseCase',
    'parse_riot_id',
    'MatchHistorySession',
]
