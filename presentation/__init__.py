"""Presentation layer - User interfaces."""
from .cli import HistoryCommand

__all__ = ["HistoryCommand"]
