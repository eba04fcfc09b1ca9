"""Best-effort rank-at-time lookups."""
from __future__ import annotations

from typing import Optional

from core.logging import get_logger
from domain.entities import PlayerRank
from domain.interfaces import IRankRepository

logger = get_logger(__name__, service="rank")


class RankLookupAdapter:
    """
    Wraps the rank repository so that a missing rank never aborts a
    transform: any failure is logged and reported as "no rank" (None).
    """

    def __init__(self, repository: IRankRepository) -> None:
        self.repository = repository

    async def get_rank_at_time(self, puuid: str, queue_id: int, timestamp: int) -> Optional[PlayerRank]:
        try:
            return await self.repository.get_rank_at_time(puuid, queue_id, timestamp)
        except Exception as exc:
            logger.warning(
                lambda: f"rank lookup failed, treating as unranked: {exc}",
                extra={"account": puuid},
            )
            return None
