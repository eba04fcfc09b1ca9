"""Match repository implementation."""
from typing import Any, Dict, List, Optional

from core.logging import get_logger
from domain.entities import MatchFilter, MatchSummary, ParticipantSummary, RawMatch
from domain.interfaces import IMatchRepository
from infrastructure.api import BackendAPIClient

logger = get_logger(__name__, service="backend")


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _opt_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class MatchRepository(IMatchRepository):
    """Repository for match data served by the dashboard backend."""

    def __init__(self, api_client: BackendAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Backend API client instance (already entered)
        """
        self.api_client = api_client

    async def list_matches(
        self,
        puuid: str,
        match_filter: Optional[MatchFilter] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[RawMatch]:
        """Get one page of matches for an account, most recent first."""
        extra = match_filter.to_params() if match_filter else None
        rows = await self.api_client.list_matches(puuid, limit, offset, extra)
        matches: List[RawMatch] = []
        for row in rows:
            match = self.parse_match(row)
            if match is None:
                logger.warning(lambda: f"skipping malformed match row for {puuid}", extra={"account": puuid})
                continue
            matches.append(match)
        logger.debug(lambda: f"listed {len(matches)} matches", extra={"account": puuid, "count": len(matches)})
        return matches

    @classmethod
    def parse_match(cls, data: Dict[str, Any]) -> Optional[RawMatch]:
        """Parse one backend match into a RawMatch; None when it has no game id."""
        summary_data = data.get('summary') or {}
        game_id = _opt_int(summary_data.get('gameId'))
        if game_id is None:
            return None

        summary = MatchSummary(
            game_id=game_id,
            started_at=_opt_int(summary_data.get('startedAt')),
            duration=_opt_int(summary_data.get('duration')),
            queue_id=_opt_int(summary_data.get('queueId')),
        )
        participants = tuple(
            cls._parse_participant_data(p) for p in (data.get('participants') or [])
        )
        return RawMatch(summary=summary, participants=participants)

    @staticmethod
    def _parse_participant_data(p_data: Dict[str, Any]) -> ParticipantSummary:
        """Parse raw participant data into ParticipantSummary."""
        return ParticipantSummary(
            puuid=p_data.get('puuid', ''),
            champion_id=_int(p_data.get('championId')),
            champ_level=_int(p_data.get('champLevel')),
            # Outcome
            win=bool(p_data.get('win', False)),
            kills=_int(p_data.get('kills')),
            deaths=_int(p_data.get('deaths')),
            assists=_int(p_data.get('assists')),
            total_minions_killed=_int(p_data.get('totalMinionsKilled')),
            # Items
            item0=_int(p_data.get('item0')),
            item1=_int(p_data.get('item1')),
            item2=_int(p_data.get('item2')),
            item3=_int(p_data.get('item3')),
            item4=_int(p_data.get('item4')),
            item5=_int(p_data.get('item5')),
            item6=_int(p_data.get('item6')),
            # Summoner spells
            summoner1_id=_int(p_data.get('summoner1Id')),
            summoner2_id=_int(p_data.get('summoner2Id')),
            lane=p_data.get('lane') or '',
            participant_id=_int(p_data.get('participantId')),
            riot_id_game_name=p_data.get('riotIdGameName') or '',
            riot_id_tagline=p_data.get('riotIdTagline') or '',
            team_id=_opt_int(p_data.get('teamId')),
            # Damage & multikills
            total_damage_dealt_to_champions=_int(p_data.get('totalDamageDealtToChampions')),
            total_damage_taken=_int(p_data.get('totalDamageTaken')),
            double_kills=_int(p_data.get('doubleKills')),
            triple_kills=_int(p_data.get('tripleKills')),
            quadra_kills=_int(p_data.get('quadraKills')),
            penta_kills=_int(p_data.get('pentaKills')),
        )
