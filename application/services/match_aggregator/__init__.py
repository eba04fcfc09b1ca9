from .match_aggregator import AggregateResult, MatchAggregator, account_key

__all__ = ["AggregateResult", "MatchAggregator", "account_key"]
