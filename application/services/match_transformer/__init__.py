from .match_transformer import MatchTransformer, TransformBatch
from . import match_stats

__all__ = ["MatchTransformer", "TransformBatch", "match_stats"]
