import asyncio

import pytest

from application.services.match_aggregator import MatchAggregator
from application.use_cases import LoadMatchTimelineUseCase
from domain.entities import TrackedAccount
from domain.exceptions import AggregateFailureError, UpstreamUnavailableError
from tests.factories import FakeMatchRepository, participant, raw_match

A = TrackedAccount(puuid="a")
B = TrackedAccount(puuid="b")


def m(game_id, started_at, *puuids):
    return raw_match(game_id, started_at, [participant(p) for p in puuids])


def build(transformer, matches, gates=None):
    repo = FakeMatchRepository(matches, gates)
    return LoadMatchTimelineUseCase(MatchAggregator(repo, buffer_factor=1), transformer), repo


async def test_each_match_is_seen_from_the_account_that_played_it(transformer):
    use_case, _ = build(transformer, {
        "a": [m(1, 300, "a"), m(3, 100, "a", "b")],
        "b": [m(2, 200, "b"), m(3, 100, "a", "b")],
    })

    result = await use_case.execute([A, B], limit=10)

    assert [(v.id, v.account_puuid) for v in result.matches] == [(1, "a"), (2, "b"), (3, "a")]
    assert result.error is None
    assert result.warning is None
    assert use_case.matches == result.matches


async def test_has_more_follows_page_fill(transformer):
    use_case, _ = build(transformer, {"a": [m(i, 100 - i, "a") for i in range(3)]})

    first = await use_case.execute([A], limit=2)
    second = await use_case.load_more([A], limit=2)

    assert first.has_more
    assert not second.has_more
    assert [v.id for v in use_case.matches] == [0, 1, 2]


async def test_partial_failure_surfaces_warning(transformer):
    use_case, _ = build(transformer, {
        "a": [m(1, 100, "a")],
        "b": UpstreamUnavailableError("HTTP 503: unavailable", status_code=503),
    })

    result = await use_case.execute([A, B], limit=10)

    assert [v.id for v in result.matches] == [1]
    assert list(result.partial_errors) == ["b"]
    assert result.warning == "1 of 2 accounts failed to load"


async def test_total_failure_clears_timeline(transformer):
    use_case, repo = build(transformer, {"a": [m(1, 100, "a")]})
    await use_case.execute([A], limit=10)

    repo.matches["a"] = UpstreamUnavailableError("down")
    result = await use_case.execute([A], limit=10)

    assert result.error == AggregateFailureError.MESSAGE
    assert result.matches == []
    assert result.warning is None
    assert use_case.matches == []


async def test_failed_transform_is_reported_not_fatal(transformer):
    use_case, _ = build(transformer, {"a": [m(1, 200, "a"), m(2, 100, "someone-else")]})

    result = await use_case.execute([A], limit=10)

    assert [v.id for v in result.matches] == [1]
    assert list(result.failed_match_ids) == [2]


async def test_sync_skips_unchanged_account_set(transformer):
    use_case, repo = build(transformer, {"a": [m(1, 100, "a")], "b": []})

    assert await use_case.sync([A], limit=5) is not None
    assert await use_case.sync([A], limit=5) is None
    assert len(repo.calls) == 1

    changed = await use_case.sync([A, B], limit=5)
    assert changed is not None
    assert [v.id for v in changed.matches] == [1]


async def test_older_request_does_not_overwrite_newer_timeline(transformer):
    gate = asyncio.Event()
    use_case, _ = build(
        transformer,
        {"a": [m(1, 100, "a")], "b": [m(2, 200, "b")]},
        gates={"a": gate},
    )

    older = asyncio.create_task(use_case.execute([A], limit=5))
    await asyncio.sleep(0)
    newer = await use_case.execute([B], limit=5)
    gate.set()
    stale = await older

    assert stale.stale
    assert not newer.stale
    assert [v.id for v in use_case.matches] == [2]


@pytest.mark.parametrize("accounts, expected", [([A, B], "a"), ([B, A], "b")])
def test_tracked_puuid_prefers_first_listed_account(accounts, expected):
    match = m(1, 100, "a", "b")
    assert LoadMatchTimelineUseCase.tracked_puuid_for(match, accounts) == expected


def test_tracked_puuid_falls_back_to_first_account():
    assert LoadMatchTimelineUseCase.tracked_puuid_for(m(1, 100, "x"), [B, A]) == "b"
