import httpx

from domain.entities import TrackedAccount
from infrastructure.api import BackendAPIClient, RetryPolicy
from presentation.cli import TimelineCommand
from presentation.cli.timeline_command import build_use_case
from tests.factories import CHAMPIONS, ITEMS, SPELLS


def _participant(puuid, win, kills, deaths, assists):
    return {
        "puuid": puuid, "championId": 103, "champLevel": 18, "win": win,
        "kills": kills, "deaths": deaths, "assists": assists, "totalMinionsKilled": 180,
        "riotIdGameName": puuid.upper(),
    }


def _match(game_id, started_at, tracked):
    players = [_participant(tracked, True, 8, 1, 4)]
    players += [_participant(f"{tracked}-ally{i}", True, 1, 2, 1) for i in range(4)]
    players += [_participant(f"{tracked}-foe{i}", False, 1, 5, 1) for i in range(5)]
    return {"summary": {"gameId": game_id, "startedAt": started_at, "duration": 1500, "queueId": 440},
            "participants": players}


ROUTES = {
    "/api/v0/datadragon/version": {"version": "14.1.1"},
    "/api/v0/datadragon/champions": CHAMPIONS,
    "/api/v0/datadragon/items": ITEMS,
    "/api/v0/datadragon/summoner-spells": SPELLS,
}


def handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/api/v0/riot/matches":
        puuid = request.url.params["puuid"]
        if puuid == "broken":
            return httpx.Response(502, json={"error": "bad gateway"})
        offset = int(request.url.params["offset"])
        rows = [_match(1, 1_700_000_300, "a"), _match(2, 1_700_000_100, "a")] if puuid == "a" else [
            _match(3, 1_700_000_200, "b")
        ]
        return httpx.Response(200, json={"matches": rows[offset:]})
    if path.endswith("/rank-at-time"):
        return httpx.Response(200, json={"tier": "DIAMOND", "rank": "IV"})
    return httpx.Response(200, json=ROUTES[path])


async def test_wired_use_case_renders_merged_timeline():
    client = BackendAPIClient(
        "http://backend.test/api/v0",
        "secret",
        retry=RetryPolicy(max_attempts=1, backoff_base_ms=0, backoff_factor=1.0),
        transport=httpx.MockTransport(handler),
    )
    accounts = [TrackedAccount(puuid="a"), TrackedAccount(puuid="b"), TrackedAccount(puuid="broken")]

    async with client:
        result = await build_use_case(client).execute(accounts, limit=10)

    assert [(m.id, m.account_puuid) for m in result.matches] == [(1, "a"), (3, "b"), (2, "a")]
    assert result.warning == "1 of 3 accounts failed to load"
    first = result.matches[0]
    assert first.queue_type == "Ranked Flex"
    assert first.stats.rank == "Diamond IV"
    assert first.placement == 1
    assert first.performance_tag == "Carry"


async def test_format_row_without_color():
    client = BackendAPIClient(
        "http://backend.test/api/v0",
        "secret",
        retry=RetryPolicy(max_attempts=1, backoff_base_ms=0, backoff_factor=1.0),
        transport=httpx.MockTransport(handler),
    )
    async with client:
        result = await build_use_case(client).execute([TrackedAccount(puuid="b")], limit=5)

    row = TimelineCommand(color=False).format_row(result.matches[0], "Beta#EUW")

    assert "\033[" not in row
    assert "Victory" in row
    assert "Beta#EUW" in row
    assert "8/1/4" in row
    assert "Diamond IV" in row
