"""Tracked account entity."""
from dataclasses import dataclass
from typing import Optional
from ..enums import Region


@dataclass(frozen=True)
class TrackedAccount:
    """A game account whose match history is followed.

    Replaced wholesale on refetch; never mutated.
    """

    puuid: str
    game_name: str = ""
    tag_line: str = ""
    region: Optional[Region] = None
    streamer_id: Optional[int] = None
    synced_at: Optional[int] = None  # Unix seconds of the last backend sync

    @property
    def riot_id(self) -> str:
        """``GameName#TAG``, or the puuid when the account has no name yet."""
        if not self.game_name:
            return self.puuid
        return f"{self.game_name}#{self.tag_line}" if self.tag_line else self.game_name

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'game_name': self.game_name,
            'tag_line': self.tag_line,
            'riot_id': self.riot_id,
            'region': self.region.value if self.region else None,
            'streamer_id': self.streamer_id,
            'synced_at': self.synced_at,
        }
