"""Use case: aggregated, display-ready match timeline for tracked accounts."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from config import settings
from core.logging import get_logger
from domain.entities import DisplayMatch, MatchFilter, RawMatch, TrackedAccount
from application.services.match_aggregator import AggregateResult, MatchAggregator
from application.services.match_transformer import MatchTransformer

logger = get_logger(__name__, service="timeline")


@dataclass
class TimelineResult:
    matches: List[DisplayMatch] = field(default_factory=list)
    partial_errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
    failed_match_ids: Dict[int, str] = field(default_factory=dict)
    has_more: bool = False
    stale: bool = False
    account_count: int = 0

    @property
    def warning(self) -> Optional[str]:
        """Banner text for a partial failure, None otherwise."""
        if self.error is not None or not self.partial_errors:
            return None
        return f"{len(self.partial_errors)} of {self.account_count} accounts failed to load"


class LoadMatchTimelineUseCase:
    """
    Aggregates raw matches across accounts, then transforms each one from the
    perspective of the tracked account that played it.

    The display collection follows the aggregator: replaced on a first page,
    appended on ``load_more``, untouched by stale results.
    """

    def __init__(self, aggregator: MatchAggregator, transformer: MatchTransformer):
        self.aggregator  = aggregator
        self.transformer = transformer
        self._matches: List[DisplayMatch] = []

    @property
    def matches(self) -> List[DisplayMatch]:
        return list(self._matches)

    async def execute(
        self,
        accounts: Sequence[TrackedAccount],
        limit: Optional[int] = None,
        match_filter: Optional[MatchFilter] = None,
    ) -> TimelineResult:
        """First page; replaces the timeline."""
        aggregate = await self.aggregator.refresh(accounts, match_filter, limit)
        return await self._complete(aggregate, accounts, limit, append=False)

    async def load_more(
        self,
        accounts: Sequence[TrackedAccount],
        limit: Optional[int] = None,
        match_filter: Optional[MatchFilter] = None,
    ) -> TimelineResult:
        aggregate = await self.aggregator.load_more(accounts, match_filter, limit)
        return await self._complete(aggregate, accounts, limit, append=True)

    async def sync(
        self,
        accounts: Sequence[TrackedAccount],
        limit: Optional[int] = None,
        match_filter: Optional[MatchFilter] = None,
    ) -> Optional[TimelineResult]:
        """Reload only when the account set changed; None otherwise."""
        aggregate = await self.aggregator.sync_accounts(accounts, match_filter, limit)
        if aggregate is None:
            return None
        return await self._complete(aggregate, accounts, limit, append=False)

    @staticmethod
    def tracked_puuid_for(match: RawMatch, accounts: Sequence[TrackedAccount]) -> str:
        """First account (in input order) that played in the match.

        Falls back to the first account so the transform reports the mismatch.
        """
        for account in accounts:
            if match.has_participant(account.puuid):
                return account.puuid
        return accounts[0].puuid

    async def _complete(
        self,
        aggregate: AggregateResult,
        accounts: Sequence[TrackedAccount],
        limit: Optional[int],
        *,
        append: bool,
    ) -> TimelineResult:
        result = TimelineResult(
            partial_errors=aggregate.partial_errors,
            error=aggregate.error,
            stale=aggregate.stale,
            account_count=len({a.puuid for a in accounts}),
        )
        if aggregate.error is not None or not aggregate.matches:
            if not append and not aggregate.stale:
                self._matches = []
            return result

        batch = await self.transformer.transform_matches(
            (m, self.tracked_puuid_for(m, accounts)) for m in aggregate.matches
        )
        result.matches = batch.matches
        result.failed_match_ids = dict(batch.failures)
        page_size = limit if limit is not None else settings.DEFAULT_PAGE_SIZE
        result.has_more = len(aggregate.matches) >= page_size

        if batch.failures:
            logger.warning(
                lambda: f"{len(batch.failures)} of {len(aggregate.matches)} matches could not be displayed",
                extra={"count": len(batch.failures)},
            )
        if result.warning:
            logger.warning(lambda: result.warning)

        # a newer fetch may have started while this page was transforming
        if aggregate.stale or aggregate.generation != self.aggregator.generation:
            result.stale = True
            return result
        self._matches = (self._matches + batch.matches) if append else batch.matches
        return result
