"""Presentation CLI exports."""
from .history_command import HistoryCommand

__all__ = ["HistoryCommand"]
