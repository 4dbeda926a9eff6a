"""Infrastructure layer - API clients and repositories."""
from .api import RiotAPIClient, DataDragonClient, RateLimiter, HostRateLimiter
from .repositories import MatchRepository, AccountRepository, StaticDataRepository

__all__ = [
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'HostRateLimiter',
    'MatchRepository',
    'AccountRepository',
    'StaticDataRepository',
]
