"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Tier(Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def is_apex(self) -> bool:
        """Master and above have no divisions."""
        return self in (Tier.MASTER, Tier.GRANDMASTER, Tier.CHALLENGER)

    @property
    def label(self) -> str:
        """Title-cased tier name, e.g. ``Gold``."""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, tier: Optional[str]) -> Optional['Tier']:
        """Create Tier from string; unknown or empty values give None."""
        if not tier:
            return None
        try:
            return cls[tier.strip().upper()]
        except KeyError:
            return None
