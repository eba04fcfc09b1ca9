"""Display-ready match record consumed by the UI."""
from dataclasses import dataclass, field, asdict
from typing import Tuple


@dataclass(frozen=True)
class ChampionView:
    name: str
    image: str
    level: int


@dataclass(frozen=True)
class KdaLine:
    kills: int
    deaths: int
    assists: int


@dataclass(frozen=True)
class MatchStats:
    laning: str
    kill_participation: str
    cs: str
    rank: str


@dataclass(frozen=True)
class RosterEntry:
    name: str
    champion: str


@dataclass(frozen=True)
class TeamRosters:
    """Blue is always the tracked player's side."""

    blue: Tuple[RosterEntry, ...] = field(default_factory=tuple)
    red: Tuple[RosterEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DisplayMatch:
    """A RawMatch projected onto one tracked player's perspective.

    Identity is the game id; every field is populated.
    """

    id: int
    account_puuid: str
    started_at: int
    duration_seconds: int
    queue_type: str
    time_ago: str
    result: str
    duration: str
    champion: ChampionView
    kda: KdaLine
    kda_ratio: str
    summoner_spells: Tuple[str, str]
    items: Tuple[str, ...]
    trinket: str
    stats: MatchStats
    placement: int
    placement_label: str
    performance_tag: str
    teams: TeamRosters

    @property
    def is_victory(self) -> bool:
        return self.result == "Victory"

    def to_dict(self) -> dict:
        """Plain nested dict (tuples become lists) for JSON rendering."""
        data = asdict(self)
        data['summoner_spells'] = list(self.summoner_spells)
        data['items'] = list(self.items)
        data['teams'] = {
            'blue': [asdict(e) for e in self.teams.blue],
            'red': [asdict(e) for e in self.teams.red],
        }
        return data


def ordinal(num: int) -> str:
    """1 -> ``1st``, 2 -> ``2nd``, 11 -> ``11th``."""
    j, k = num % 10, num % 100
    if j == 1 and k != 11:
        return f"{num}st"
    if j == 2 and k != 12:
        return f"{num}nd"
    if j == 3 and k != 13:
        return f"{num}rd"
    return f"{num}th"
