from __future__ import annotations

import json
import shutil
from typing import List, Optional, Sequence

from config import settings
from core.logging import get_logger
from domain.entities import DisplayMatch, MatchFilter, TrackedAccount
from infrastructure import (
    AccountRepository,
    AssetRepository,
    BackendAPIClient,
    MatchRepository,
    RankRepository,
)
from application import (
    AssetCatalogResolver,
    LoadMatchTimelineUseCase,
    MatchAggregator,
    MatchTransformer,
    RankLookupAdapter,
    TimelineResult,
)

_GREEN = "\033[92m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_CYAN = "\033[96m"
_DIM = "\033[90m"
_RESET = "\033[0m"

_TAG_COLORS = {"Carry": _GREEN, "Struggle": _RED, "Average": _DIM}


def build_use_case(client: BackendAPIClient) -> LoadMatchTimelineUseCase:
    """Wire repositories, resolver, adapter, transformer and aggregator."""
    resolver = AssetCatalogResolver(AssetRepository(client))
    ranks = RankLookupAdapter(RankRepository(client))
    transformer = MatchTransformer(resolver, ranks)
    aggregator = MatchAggregator(MatchRepository(client))
    return LoadMatchTimelineUseCase(aggregator, transformer)


class TimelineCommand:
    """Prints the merged match timeline of tracked accounts."""

    def __init__(
        self,
        puuids: Sequence[str] = (),
        *,
        streamer_id: Optional[int] = None,
        limit: Optional[int] = None,
        pages: int = 1,
        queue_id: Optional[int] = None,
        json_out: bool = False,
        color: bool = True,
    ) -> None:
        self.puuids = [p for p in puuids if p]
        self.streamer_id = streamer_id
        self.limit = limit or settings.DEFAULT_PAGE_SIZE
        self.pages = max(1, pages)
        self.match_filter = MatchFilter(queue_id=queue_id) if queue_id else None
        self.json_out = json_out
        self.color = color
        self._log = get_logger(__name__, service="cli")

    async def run(self) -> int:
        settings.validate()
        async with BackendAPIClient() as client:
            accounts = await self._resolve_accounts(client)
            if not accounts:
                print("No tracked accounts.")
                return 0

            use_case = build_use_case(client)
            result = await use_case.execute(accounts, self.limit, self.match_filter)
            if result.error:
                self._print_error(result)
                return 1
            self._print_warning(result)

            pages = 1
            while result.has_more and pages < self.pages:
                result = await use_case.load_more(accounts, self.limit, self.match_filter)
                self._print_warning(result)
                pages += 1

            self._render(use_case.matches, accounts)
        return 0

    async def _resolve_accounts(self, client: BackendAPIClient) -> List[TrackedAccount]:
        if self.puuids:
            return [TrackedAccount(puuid=p) for p in dict.fromkeys(self.puuids)]
        accounts = await AccountRepository(client).list_accounts()
        if self.streamer_id is not None:
            accounts = [a for a in accounts if a.streamer_id == self.streamer_id]
        self._log.info(lambda: f"tracking {len(accounts)} accounts", extra={"count": len(accounts)})
        return accounts

    # ── Output ─────────────────────────────────────────────────────────

    def _c(self, color: str, text: str) -> str:
        return f"{color}{text}{_RESET}" if self.color else text

    def _print_error(self, result: TimelineResult) -> None:
        print(self._c(_RED, f"Error: {result.error}"))
        for puuid, message in result.partial_errors.items():
            print(f"  {puuid}: {message}")

    def _print_warning(self, result: TimelineResult) -> None:
        if result.warning:
            print(self._c(_YELLOW, f"Warning: {result.warning}"))
        if result.failed_match_ids:
            ids = ", ".join(str(i) for i in result.failed_match_ids)
            print(self._c(_YELLOW, f"Warning: skipped matches {ids}"))

    def _render(self, matches: List[DisplayMatch], accounts: Sequence[TrackedAccount]) -> None:
        if self.json_out:
            print(json.dumps([m.to_dict() for m in matches], indent=2))
            return
        names = {a.puuid: a.riot_id for a in accounts}
        cols = shutil.get_terminal_size(fallback=(100, 20)).columns
        print(self._c(_CYAN, "═" * min(cols, 96)))
        for match in matches:
            print(self.format_row(match, names.get(match.account_puuid, match.account_puuid)))
        print(self._c(_CYAN, "═" * min(cols, 96)))
        print(f"{len(matches)} matches")

    def format_row(self, match: DisplayMatch, player: str) -> str:
        result_color = _GREEN if match.is_victory else _RED
        kda = f"{match.kda.kills}/{match.kda.deaths}/{match.kda.assists}"
        tag = self._c(_TAG_COLORS.get(match.performance_tag, ""), f"{match.performance_tag:<8}")
        return (
            f"{match.time_ago:>16}  {self._c(result_color, f'{match.result:<7}')} "
            f"{match.queue_type:<16} {match.duration:>8}  {player:<24} "
            f"{match.champion.name or '?':<12} {kda:>8} ({match.kda_ratio:>7})  "
            f"KP {match.stats.kill_participation:>4}  CS {match.stats.cs:<12} "
            f"{match.placement_label:>4} {tag} {match.stats.rank}"
        )
