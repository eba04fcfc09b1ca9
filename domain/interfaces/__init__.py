"""Domain interfaces."""
from .repository import IAccountRepository, IAssetRepository, IMatchRepository, IRankRepository

__all__ = [
    'IAccountRepository',
    'IAssetRepository',
    'IMatchRepository',
    'IRankRepository',
]
