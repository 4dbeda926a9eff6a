"""Application layer - services and use cases."""
from .services import MatchHistoryService
from .use_cases import MatchHistorySession, SearchPlayerUseCase, parse_riot_id

__all__ = [
    'MatchHistoryService',
    'MatchHistorySession',
    'SearchPlayerUseCase',
    'parse_riot_id',
]
