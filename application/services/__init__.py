"""Application services root exports."""
from .asset_catalog import AssetCatalogResolver
from .rank import RankLookupAdapter
from .match_transformer import MatchTransformer, TransformBatch
from .match_aggregator import AggregateResult, MatchAggregator

__all__ = [
    "AssetCatalogResolver",
    "RankLookupAdapter",
    "MatchTransformer",
    "TransformBatch",
    "AggregateResult",
    "MatchAggregator",
]
