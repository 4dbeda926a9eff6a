"""Domain interfaces."""
from .repository import IAccountRepository, IMatchRepository

__all__ = [
    'IAccountRepository',
    'IMatchRepository',
]
