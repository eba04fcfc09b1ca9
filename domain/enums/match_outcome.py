"""Match result and performance tag enumerations."""
from enum import Enum


class MatchResult(Enum):
    VICTORY = "Victory"
    DEFEAT = "Defeat"

    @classmethod
    def from_win(cls, win: bool) -> 'MatchResult':
        return cls.VICTORY if win else cls.DEFEAT


class PerformanceTag(Enum):
    """Coarse label derived from placement and result."""

    CARRY = "Carry"
    AVERAGE = "Average"
    STRUGGLE = "Struggle"

    @classmethod
    def from_placement(cls, placement: int, win: bool) -> 'PerformanceTag':
        if placement <= 3 and win:
            return cls.CARRY
        if placement >= 8 and not win:
            return cls.STRUGGLE
        return cls.AVERAGE
