from .rank_lookup_adapter import RankLookupAdapter

__all__ = ["RankLookupAdapter"]
