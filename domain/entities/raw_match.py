"""Raw match entities as returned by the backend."""
from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class MatchSummary:
    """Game-level fields of a completed match."""

    game_id: int
    started_at: Optional[int] = None  # Unix timestamp seconds
    duration: Optional[int] = None    # Seconds
    queue_id: Optional[int] = None


@dataclass(frozen=True)
class ParticipantSummary:
    """One of the (usually ten) players in a match."""

    puuid: str
    champion_id: int = 0
    champ_level: int = 0

    # Outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    total_minions_killed: int = 0

    # Items (slots 0-5, 6 is the trinket); 0 means empty slot
    item0: int = 0
    item1: int = 0
    item2: int = 0
    item3: int = 0
    item4: int = 0
    item5: int = 0
    item6: int = 0

    # Summoner spells
    summoner1_id: int = 0
    summoner2_id: int = 0

    lane: str = ""
    participant_id: int = 0
    riot_id_game_name: str = ""
    riot_id_tagline: str = ""

    # Only present when the backend exposes it (100 = blue, 200 = red)
    team_id: Optional[int] = None

    total_damage_dealt_to_champions: int = 0
    total_damage_taken: int = 0
    double_kills: int = 0
    triple_kills: int = 0
    quadra_kills: int = 0
    penta_kills: int = 0

    @property
    def items(self) -> Tuple[int, ...]:
        """Item ids in slots 0-5 (trinket excluded)."""
        return (self.item0, self.item1, self.item2, self.item3, self.item4, self.item5)

    @property
    def summoner_spells(self) -> Tuple[int, int]:
        return (self.summoner1_id, self.summoner2_id)

    @property
    def takedowns(self) -> int:
        return self.kills + self.assists


@dataclass(frozen=True)
class RawMatch:
    """Immutable snapshot of one completed game."""

    summary: MatchSummary
    participants: Tuple[ParticipantSummary, ...] = field(default_factory=tuple)

    @property
    def game_id(self) -> int:
        """Deduplication key across accounts and pages."""
        return self.summary.game_id

    @property
    def started_at(self) -> int:
        """Start timestamp with absent values treated as the epoch."""
        return self.summary.started_at or 0

    def find_participant(self, puuid: str) -> Optional[ParticipantSummary]:
        return next((p for p in self.participants if p.puuid == puuid), None)

    def has_participant(self, puuid: str) -> bool:
        return self.find_participant(puuid) is not None
