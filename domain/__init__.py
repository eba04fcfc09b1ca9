"""Domain layer - Entities, enums, exceptions and repository interfaces."""
from .entities import (
    AssetCatalog, DisplayMatch, MatchFilter, MatchSummary,
    ParticipantSummary, PlayerRank, RawMatch, TrackedAccount,
)
from .enums import Region, QueueType, Tier, MatchResult, PerformanceTag
from .exceptions import (
    TimelineError, MatchNotFoundError, UpstreamUnavailableError, AggregateFailureError,
)
from .interfaces import IAccountRepository, IAssetRepository, IMatchRepository, IRankRepository

__all__ = [
    # Entities
    'AssetCatalog',
    'DisplayMatch',
    'MatchFilter',
    'MatchSummary',
    'ParticipantSummary',
    'PlayerRank',
    'RawMatch',
    'TrackedAccount',
    # Enums
    'Region',
    'QueueType',
    'Tier',
    'MatchResult',
    'PerformanceTag',
    # Exceptions
    'TimelineError',
    'MatchNotFoundError',
    'UpstreamUnavailableError',
    'AggregateFailureError',
    # Interfaces
    'IAccountRepository',
    'IAssetRepository',
    'IMatchRepository',
    'IRankRepository',
]
