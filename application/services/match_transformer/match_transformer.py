"""Raw match -> display-ready match for one tracked player."""
from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from config import settings
from core.logging import context, get_logger, traceable
from domain.entities import (
    ChampionView,
    DisplayMatch,
    KdaLine,
    MatchStats,
    ParticipantSummary,
    PlayerRank,
    RawMatch,
    RosterEntry,
    TeamRosters,
    ordinal,
)
from domain.enums import MatchResult, PerformanceTag, QueueType
from domain.exceptions import MatchNotFoundError
from application.services.asset_catalog import AssetCatalogResolver
from application.services.rank import RankLookupAdapter
from . import match_stats

logger = get_logger(__name__, service="transform")

ROSTER_SIZE = 5


@dataclass
class TransformBatch:
    """Outcome of transforming many matches with per-match isolation."""

    matches: List[DisplayMatch] = field(default_factory=list)
    failures: Dict[int, str] = field(default_factory=dict)  # game id -> error

    @property
    def failed_match_ids(self) -> List[int]:
        return list(self.failures)


class MatchTransformer:
    """
    Builds DisplayMatch records.

    Catalog failures propagate out of ``transform_match``; rank failures
    degrade to "Unranked".
    """

    def __init__(
        self,
        catalog: AssetCatalogResolver,
        ranks: RankLookupAdapter,
        *,
        clock: Callable[[], float] = time.time,
        max_concurrency: Optional[int] = None,
    ) -> None:
        self.catalog = catalog
        self.ranks   = ranks
        self.clock   = clock
        self._max_concurrency = max_concurrency or settings.MAX_CONCURRENT_TRANSFORMS

    @traceable
    async def transform_match(self, raw_match: RawMatch, tracked_puuid: str) -> DisplayMatch:
        summary = raw_match.summary
        player = raw_match.find_participant(tracked_puuid)
        if player is None:
            raise MatchNotFoundError(tracked_puuid, summary.game_id)

        await self.catalog.ensure_catalog()

        participants = raw_match.participants
        place = match_stats.placement(participants, tracked_puuid)
        allies, enemies = match_stats.split_teams(participants, player)

        queue_id = summary.queue_id or settings.DEFAULT_QUEUE_ID
        rank = await self.ranks.get_rank_at_time(tracked_puuid, queue_id, summary.started_at or 0)

        cs_min = match_stats.cs_per_minute(player.total_minions_killed, summary.duration)
        return DisplayMatch(
            id=summary.game_id,
            account_puuid=tracked_puuid,
            started_at=summary.started_at or 0,
            duration_seconds=summary.duration or 0,
            queue_type=QueueType.name_for(queue_id),
            time_ago=match_stats.time_ago(summary.started_at, self.clock()),
            result=MatchResult.from_win(player.win).value,
            duration=match_stats.format_duration(summary.duration),
            champion=ChampionView(
                name=self.catalog.champion_name(player.champion_id),
                image=self.catalog.champion_icon_url(player.champion_id),
                level=player.champ_level or 1,
            ),
            kda=KdaLine(kills=player.kills, deaths=player.deaths, assists=player.assists),
            kda_ratio=match_stats.kda_ratio(player.kills, player.deaths, player.assists),
            summoner_spells=(
                self.catalog.spell_icon_url(player.summoner1_id),
                self.catalog.spell_icon_url(player.summoner2_id),
            ),
            items=tuple(self.catalog.item_icon_url(item) for item in player.items),
            trinket=self.catalog.item_icon_url(player.item6),
            stats=MatchStats(
                laning="N/A",
                kill_participation=match_stats.kill_participation(player, allies),
                cs=f"{player.total_minions_killed} ({cs_min})",
                rank=PlayerRank.format(rank),
            ),
            placement=place,
            placement_label=ordinal(place),
            performance_tag=PerformanceTag.from_placement(place, player.win).value,
            teams=TeamRosters(blue=self._roster(allies), red=self._roster(enemies)),
        )

    def _roster(self, players: Sequence[ParticipantSummary]) -> Tuple[RosterEntry, ...]:
        return tuple(
            RosterEntry(
                name=p.riot_id_game_name or "Unknown",
                champion=self.catalog.champion_icon_url(p.champion_id),
            )
            for p in players[:ROSTER_SIZE]
        )

    async def transform_matches(self, pairs: Iterable[Tuple[RawMatch, str]]) -> TransformBatch:
        """Transform concurrently; a failing match is logged and skipped.

        Successful records keep input order.
        """
        pairs = list(pairs)
        sem = asyncio.Semaphore(self._max_concurrency)

        async def _one(raw_match: RawMatch, puuid: str) -> DisplayMatch:
            async with sem:
                with context(account=puuid, game_id=raw_match.game_id):
                    return await self.transform_match(raw_match, puuid)

        results = await asyncio.gather(
            *(_one(m, p) for m, p in pairs), return_exceptions=True
        )

        batch = TransformBatch()
        for (raw_match, puuid), result in zip(pairs, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                batch.failures[raw_match.game_id] = str(result) or type(result).__name__
                logger.warning(
                    lambda: f"dropping match {raw_match.game_id}: {result}",
                    extra={"account": puuid, "game_id": raw_match.game_id},
                )
                continue
            batch.matches.append(result)
        return batch
