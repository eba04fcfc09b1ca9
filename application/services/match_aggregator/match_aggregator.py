"""Multi-account match aggregation: fan-out, dedup, sort, paginate."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from config import settings
from core.logging import context, get_logger
from domain.entities import MatchFilter, RawMatch, TrackedAccount
from domain.exceptions import AggregateFailureError
from domain.interfaces import IMatchRepository

logger = get_logger(__name__, service="aggregator")


@dataclass
class AggregateResult:
    """One fetch cycle.

    ``matches`` is the page this call produced; the aggregator's
    ``matches`` property holds the whole retained collection.
    """

    matches: List[RawMatch] = field(default_factory=list)
    partial_errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
    generation: int = 0
    stale: bool = False
    # puuid -> upstream offset to request that account from on the next page
    account_offsets: Dict[str, int] = field(default_factory=dict)

    @property
    def has_partial_failure(self) -> bool:
        return bool(self.partial_errors) and self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise AggregateFailureError(self.partial_errors)


def account_key(accounts: Sequence[TrackedAccount]) -> str:
    """Identity of an account set: sorted puuids joined by commas."""
    return ",".join(sorted({a.puuid for a in accounts}))


class MatchAggregator:
    """
    Owns the in-memory match collection for one session.

    - Requests for all accounts run concurrently and are awaited all-settled;
      a failing account lands in ``partial_errors`` and never blocks the rest.
    - Each account is asked for ``limit * DEDUP_BUFFER_FACTOR`` matches so the
      merged page is still full after duplicates are dropped.
    - Duplicates (same game id) keep the first-seen entry in account order.
    - Output is sorted by start time, newest first; missing start times count
      as 0.
    - ``offset == 0`` replaces the collection; ``offset > 0`` appends a page.
      Game ids already retained are never appended again. A later page asks
      each account from its own offset: the count of its leading rows that
      were shown (or dropped as duplicates of shown rows), so rows fetched
      but cut from an earlier page are requested again.
    - Every call takes a generation number. A call that completes after a
      newer one started returns its result marked ``stale`` and leaves the
      collection alone.
    """

    def __init__(self, repository: IMatchRepository, *, buffer_factor: Optional[int] = None) -> None:
        self.repository    = repository
        self.buffer_factor = buffer_factor or settings.DEDUP_BUFFER_FACTOR

        self._matches:        List[RawMatch] = []
        self._partial_errors: Dict[str, str] = {}
        self._error:          Optional[str]  = None
        self._seen_ids:       Set[int]       = set()
        self._account_offsets: Dict[str, int] = {}
        self._generation:     int            = 0
        self._in_flight:      int            = 0
        self._account_key:    Optional[str]  = None

    # ------------------------------------------------------------------ #
    # State
    # ------------------------------------------------------------------ #

    @property
    def matches(self) -> List[RawMatch]:
        return list(self._matches)

    @property
    def partial_errors(self) -> Dict[str, str]:
        return dict(self._partial_errors)

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def generation(self) -> int:
        return self._generation

    def reset(self) -> None:
        """Forget everything, including which ids were already shown."""
        self._matches = []
        self._partial_errors = {}
        self._error = None
        self._seen_ids = set()
        self._account_offsets = {}
        self._account_key = None

    # ------------------------------------------------------------------ #
    # Public entry points
    # ------------------------------------------------------------------ #

    async def fetch_matches(
        self,
        accounts: Sequence[TrackedAccount],
        match_filter: Optional[MatchFilter] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> AggregateResult:
        limit = settings.DEFAULT_PAGE_SIZE if limit is None else limit
        if limit <= 0:
            raise ValueError(f"limit must be positive, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")

        self._generation += 1
        generation = self._generation
        self._account_key = account_key(accounts)

        if not accounts:
            result = AggregateResult(generation=generation)
            self._apply(result, offset)
            return result

        self._in_flight += 1
        try:
            with context(generation=generation):
                result = await self._fetch(accounts, match_filter, limit, offset, generation)
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug(
                lambda: f"discarding stale result of generation {generation} (current {self._generation})",
                extra={"generation": generation},
            )
            result.stale = True
            return result

        self._apply(result, offset)
        return result

    async def sync_accounts(
        self,
        accounts: Sequence[TrackedAccount],
        match_filter: Optional[MatchFilter] = None,
        limit: Optional[int] = None,
    ) -> Optional[AggregateResult]:
        """Refetch from offset 0 only when the account set changed.

        Returns None when the set is unchanged.
        """
        if self._account_key is not None and account_key(accounts) == self._account_key:
            return None
        self.reset()
        return await self.fetch_matches(accounts, match_filter, limit, offset=0)

    async def refresh(
        self,
        accounts: Sequence[TrackedAccount],
        match_filter: Optional[MatchFilter] = None,
        limit: Optional[int] = None,
    ) -> AggregateResult:
        self.reset()
        return await self.fetch_matches(accounts, match_filter, limit, offset=0)

    async def load_more(
        self,
        accounts: Sequence[TrackedAccount],
        match_filter: Optional[MatchFilter] = None,
        limit: Optional[int] = None,
    ) -> AggregateResult:
        """Next page; any ``offset > 0`` resumes every account at its own offset."""
        return await self.fetch_matches(accounts, match_filter, limit, offset=len(self._matches))

    # ------------------------------------------------------------------ #
    # Internals
    # ------------------------------------------------------------------ #

    async def _fetch(
        self,
        accounts: Sequence[TrackedAccount],
        match_filter: Optional[MatchFilter],
        limit: int,
        offset: int,
        generation: int,
    ) -> AggregateResult:
        puuids = list(dict.fromkeys(a.puuid for a in accounts))
        request_size = limit * self.buffer_factor
        # Accounts advance independently: each resumes after the rows it has
        # already contributed, not at the length of the merged collection.
        starts = {p: (self._account_offsets.get(p, 0) if offset > 0 else 0) for p in puuids}

        results = await asyncio.gather(
            *(self._fetch_account(p, match_filter, request_size, starts[p]) for p in puuids),
            return_exceptions=True,
        )

        partial_errors: Dict[str, str] = {}
        fetched: List[Tuple[str, List[RawMatch]]] = []
        for puuid, res in zip(puuids, results):
            if isinstance(res, asyncio.CancelledError):
                raise res
            if isinstance(res, BaseException):
                partial_errors[puuid] = str(res) or type(res).__name__
                continue
            fetched.append((puuid, res))

        if not fetched:
            logger.error(
                lambda: f"{AggregateFailureError.MESSAGE} ({len(puuids)} accounts)",
                extra={"count": len(puuids)},
            )
            return AggregateResult(
                partial_errors=partial_errors,
                error=AggregateFailureError.MESSAGE,
                generation=generation,
            )

        if partial_errors:
            logger.warning(
                lambda: f"{len(partial_errors)} of {len(puuids)} accounts failed to fetch matches",
                extra={"count": len(partial_errors)},
            )

        exclude = self._seen_ids if offset > 0 else set()
        page = self.merge(fetched, exclude=exclude)[:limit]
        logger.info(
            lambda: f"aggregated {len(page)} matches from {len(fetched)} accounts (offset {offset})",
            extra={"count": len(page)},
        )
        consumed = exclude | {m.game_id for m in page}
        return AggregateResult(
            matches=page,
            partial_errors=partial_errors,
            generation=generation,
            account_offsets={
                puuid: starts[puuid] + self.consumed_prefix(rows, consumed) for puuid, rows in fetched
            },
        )

    async def _fetch_account(
        self, puuid: str, match_filter: Optional[MatchFilter], count: int, offset: int
    ) -> List[RawMatch]:
        with context(account=puuid):
            try:
                return await self.repository.list_matches(puuid, match_filter, count, offset)
            except Exception as exc:
                logger.warning(lambda: f"match fetch failed: {exc}", extra={"account": puuid})
                raise

    @staticmethod
    def merge(
        fetched: Sequence[Tuple[str, Sequence[RawMatch]]],
        exclude: Optional[Set[int]] = None,
    ) -> List[RawMatch]:
        """Dedup by game id (first seen wins), then newest first."""
        exclude = exclude or set()
        by_id: Dict[int, RawMatch] = {}
        for _, matches in fetched:
            for match in matches:
                if match.game_id in exclude or match.game_id in by_id:
                    continue
                by_id[match.game_id] = match
        # sorted() is stable, so equal timestamps keep first-seen order
        return sorted(by_id.values(), key=lambda m: m.started_at, reverse=True)

    @staticmethod
    def consumed_prefix(rows: Sequence[RawMatch], consumed: Set[int]) -> int:
        """Leading rows of one account already shown, on this page or earlier.

        Counting stops at the first row cut from the page so the next request
        starts there; duplicates of rows shown from another account count as
        consumed.
        """
        count = 0
        for match in rows:
            if match.game_id not in consumed:
                break
            count += 1
        return count

    def _apply(self, result: AggregateResult, offset: int) -> None:
        self._partial_errors = dict(result.partial_errors)
        self._error = result.error
        if offset == 0:
            self._matches = list(result.matches)
            self._seen_ids = {m.game_id for m in result.matches}
            self._account_offsets = dict(result.account_offsets)
        else:
            self._matches = self._matches + list(result.matches)
            self._seen_ids |= {m.game_id for m in result.matches}
            # a failed account keeps its previous offset
            self._account_offsets.update(result.account_offsets)
