"""Error taxonomy for the match timeline core."""
from typing import Dict, Optional


class TimelineError(Exception):
    """Base class for every error raised by the timeline core."""


class MatchNotFoundError(TimelineError):
    """The tracked account is not a participant of the match.

    Indicates a caller bug (the wrong account was paired with the match);
    never retried.
    """

    def __init__(self, puuid: str, game_id: int) -> None:
        super().__init__(f"tracked account {puuid} not found in participants of match {game_id}")
        self.puuid = puuid
        self.game_id = game_id


class UpstreamUnavailableError(TimelineError):
    """The backend could not be reached or answered with an error."""

    def __init__(self, message: str, *, url: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    @property
    def is_transient(self) -> bool:
        """Network failures, 429 and 5xx are worth retrying."""
        if self.status_code is None:
            return True
        return self.status_code == 429 or 500 <= self.status_code < 600


class AggregateFailureError(TimelineError):
    """Every account of a fan-out fetch failed."""

    MESSAGE = "failed to fetch matches from all accounts"

    def __init__(self, partial_errors: Dict[str, str]) -> None:
        super().__init__(self.MESSAGE)
        self.partial_errors = dict(partial_errors)
