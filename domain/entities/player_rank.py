"""Point-in-time rank snapshot."""
from dataclasses import dataclass
from typing import Optional
from ..enums import Tier

UNRANKED = "Unranked"


@dataclass(frozen=True)
class PlayerRank:
    """Ranked standing of an account in one queue at a moment in time."""

    puuid: str
    tier: Tier
    division: str = ""
    league_points: int = 0
    wins: int = 0
    losses: int = 0
    queue_id: int = 0
    timestamp: int = 0

    @property
    def display(self) -> str:
        """``Gold II``; apex tiers have no division (``Master``)."""
        if self.tier.is_apex or not self.division:
            return self.tier.label
        return f"{self.tier.label} {self.division}"

    @staticmethod
    def format(rank: Optional['PlayerRank']) -> str:
        return rank.display if rank else UNRANKED
