"""Queue type enumeration."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """Matchmaking queues the timeline knows how to label.

    Provides:
    - queue_id: numeric queue id used by match and rank endpoints
    - queue_name: human-readable name shown on match cards
    """

    RANKED_SOLO_5x5 = 420
    RANKED_FLEX_SR = 440
    NORMAL_DRAFT = 400
    NORMAL_BLIND = 430
    ARAM = 450
    CLASH = 700
    URF = 900
    ONE_FOR_ALL = 1020
    NEXUS_BLITZ = 1300
    ULTIMATE_SPELLBOOK = 1400
    ARENA = 1700

    @property
    def queue_id(self) -> int:
        """Get queue ID for API calls."""
        return self.value

    @property
    def queue_name(self) -> str:
        """Get human-readable queue name."""
        return _QUEUE_NAMES[self.value]

    @property
    def is_ranked(self) -> bool:
        return self in (QueueType.RANKED_SOLO_5x5, QueueType.RANKED_FLEX_SR)

    @classmethod
    def from_id(cls, queue_id: Optional[int]) -> Optional['QueueType']:
        """Return the queue for an id, or None when it is not a known queue."""
        try:
            return cls(queue_id)
        except ValueError:
            return None

    @classmethod
    def name_for(cls, queue_id: Optional[int]) -> str:
        queue = cls.from_id(queue_id)
        return queue.queue_name if queue else "Unknown Queue"


_QUEUE_NAMES = {
    420: "Ranked Solo/Duo",
    440: "Ranked Flex",
    400: "Normal Draft",
    430: "Normal Blind",
    450: "ARAM",
    700: "Clash",
    900: "URF",
    1020: "One For All",
    1300: "Nexus Blitz",
    1400: "Ultimate Spellbook",
    1700: "Arena",
}
