"""Infrastructure layer - API client and repositories."""
from .api import BackendAPIClient, RetryPolicy, TimeoutConfig
from .repositories import AccountRepository, AssetRepository, MatchRepository, RankRepository

__all__ = [
    'BackendAPIClient',
    'RetryPolicy',
    'TimeoutConfig',
    'AccountRepository',
    'AssetRepository',
    'MatchRepository',
    'RankRepository',
]
