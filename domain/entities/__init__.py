"""Domain entities."""
from .tracked_account import TrackedAccount
from .raw_match import MatchSummary, ParticipantSummary, RawMatch
from .player_rank import PlayerRank, UNRANKED
from .asset_catalog import AssetCatalog
from .match_filter import MatchFilter
from .display_match import (
    ChampionView,
    DisplayMatch,
    KdaLine,
    MatchStats,
    RosterEntry,
    TeamRosters,
    ordinal,
)

__all__ = [
    'TrackedAccount',
    'MatchSummary',
    'ParticipantSummary',
    'RawMatch',
    'PlayerRank',
    'UNRANKED',
    'AssetCatalog',
    'MatchFilter',
    'ChampionView',
    'DisplayMatch',
    'KdaLine',
    'MatchStats',
    'RosterEntry',
    'TeamRosters',
    'ordinal',
]
