"""Rank history repository implementation."""
from typing import Any, Dict, Optional

from domain.entities import PlayerRank
from domain.enums import Tier
from domain.interfaces import IRankRepository
from infrastructure.api import BackendAPIClient


class RankRepository(IRankRepository):
    """Point-in-time rank lookups against the backend's rank history."""

    def __init__(self, api_client: BackendAPIClient):
        self.api_client = api_client

    async def get_rank_at_time(self, puuid: str, queue_id: int, timestamp: int) -> Optional[PlayerRank]:
        """None when the account had no rank in that queue at that time."""
        data = await self.api_client.get_rank_at_time(puuid, queue_id, timestamp)
        if not data:
            return None
        return self.parse_rank(data, puuid)

    @staticmethod
    def parse_rank(data: Dict[str, Any], puuid: str = '') -> Optional[PlayerRank]:
        tier = Tier.from_string(data.get('tier'))
        if tier is None:
            return None
        return PlayerRank(
            puuid=data.get('puuid') or puuid,
            tier=tier,
            division=data.get('rank') or '',
            league_points=int(data.get('leaguePoints') or 0),
            wins=int(data.get('wins') or 0),
            losses=int(data.get('losses') or 0),
            queue_id=int(data.get('queueId') or 0),
            timestamp=int(data.get('timestamp') or 0),
        )
