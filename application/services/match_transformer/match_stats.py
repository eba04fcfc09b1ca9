"""Pure per-match computations used by the transformer."""
from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from domain.entities import ParticipantSummary

# Zero deaths outranks every finite (k+a)/d, whatever the kill count.
PERFECT_KDA_SCORE = math.inf

UNKNOWN_AGE = "Unknown"


def kda_score(p: ParticipantSummary) -> float:
    if p.deaths == 0:
        return PERFECT_KDA_SCORE
    return p.takedowns / p.deaths


def placement(participants: Sequence[ParticipantSummary], puuid: str) -> int:
    """1-based rank of ``puuid`` by descending KDA score.

    Ties keep the original participant order (stable sort); there is no
    secondary tiebreak.
    """
    ranked = sorted(participants, key=kda_score, reverse=True)
    for index, p in enumerate(ranked, start=1):
        if p.puuid == puuid:
            return index
    raise ValueError(f"{puuid} is not a participant")


def kda_ratio(kills: int, deaths: int, assists: int) -> str:
    if deaths == 0:
        return "Perfect"
    return f"{(kills + assists) / deaths:.2f}:1"


def split_teams(
    participants: Sequence[ParticipantSummary], tracked: ParticipantSummary
) -> Tuple[List[ParticipantSummary], List[ParticipantSummary]]:
    """(tracked player's side, other side).

    Uses ``team_id`` when every participant carries one. Otherwise falls back
    to grouping by win flag, which is only an approximation: it is wrong for
    remakes or modes where both sides share an outcome.
    """
    if participants and all(p.team_id is not None for p in participants):
        same = [p for p in participants if p.team_id == tracked.team_id]
        other = [p for p in participants if p.team_id != tracked.team_id]
    else:
        same = [p for p in participants if p.win == tracked.win]
        other = [p for p in participants if p.win != tracked.win]
    return same, other


def kill_participation(tracked: ParticipantSummary, team: Sequence[ParticipantSummary]) -> str:
    team_kills = sum(p.kills for p in team)
    if team_kills == 0:
        return "0%"
    # round half up
    return f"{int(100 * tracked.takedowns / team_kills + 0.5)}%"


def cs_per_minute(minions: int, duration_seconds: Optional[int]) -> str:
    if not duration_seconds or duration_seconds <= 0:
        return "0.0"
    return f"{minions / (duration_seconds / 60):.1f}"


def format_duration(seconds: Optional[int]) -> str:
    seconds = seconds or 0
    return f"{seconds // 60}m {seconds % 60}s"


def _plural(value: int, unit: str) -> str:
    return f"{value} {unit}{'' if value == 1 else 's'} ago"


def time_ago(started_at: Optional[int], now: float) -> str:
    """Relative age of a Unix-seconds timestamp: minutes, then hours, then days.

    A start ahead of the local clock reads as 0 minutes; an absent start has
    no age.
    """
    if not started_at:
        return UNKNOWN_AGE
    diff = max(0.0, now - started_at)
    minutes = int(diff // 60)
    if minutes < 60:
        return _plural(minutes, "minute")
    hours = int(diff // 3600)
    if hours < 24:
        return _plural(hours, "hour")
    return _plural(int(diff // 86400), "day")
