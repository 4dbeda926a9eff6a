"""Infrastructure API module."""
from .http_client import JsonHttpClient
from .riot_client import RiotAPIClient
from .ddragon_client import DataDragonClient
from .rate_limiter import RateLimiter, HostRateLimiter

__all__ = [
    'JsonHttpClient',
    'RiotAPIClient',
    'DataDragonClient',
    'RateLimiter',
    'HostRateLimiter',
]
