"""Repository implementations backed by the dashboard API."""
from .account_repository import AccountRepository
from .asset_repository import AssetRepository
from .match_repository import MatchRepository
from .rank_repository import RankRepository

__all__ = [
    'AccountRepository',
    'AssetRepository',
    'MatchRepository',
    'RankRepository',
]
