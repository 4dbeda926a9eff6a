"""Infrastructure repositories."""
from .match_repository import MatchRepository
from .account_repository import AccountRepository
from .static_data_repository import StaticDataRepository

__all__ = [
    'MatchRepository',
    'AccountRepository',
    'StaticDataRepository',
]
