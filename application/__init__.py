"""Application layer - Services and use cases."""
from .services import (
    AssetCatalogResolver,
    RankLookupAdapter,
    MatchTransformer,
    MatchAggregator,
)
from .use_cases import LoadMatchTimelineUseCase, TimelineResult

__all__ = [
    'AssetCatalogResolver',
    'RankLookupAdapter',
    'MatchTransformer',
    'MatchAggregator',
    'LoadMatchTimelineUseCase',
    'TimelineResult',
]
