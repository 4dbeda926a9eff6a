"""Application services root exports."""
from .match_history_service import MatchHistoryService

__all__ = [
    "MatchHistoryService",
]
