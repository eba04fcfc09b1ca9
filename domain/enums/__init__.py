"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .rank import Tier
from .match_outcome import MatchResult, PerformanceTag

__all__ = [
    'Region',
    'QueueType',
    'Tier',
    'MatchResult',
    'PerformanceTag',
]
