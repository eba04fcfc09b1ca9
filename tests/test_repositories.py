import httpx

from domain.entities import MatchFilter
from domain.enums import Region, Tier
from infrastructure.api import BackendAPIClient, RetryPolicy
from infrastructure.repositories import AccountRepository, AssetRepository, MatchRepository, RankRepository

BASE_URL = "http://backend.test/api/v0"

MATCH_ROW = {
    "summary": {"gameId": 7001, "startedAt": 1_700_000_000, "duration": 1720, "queueId": 420},
    "participants": [
        {
            "puuid": "p-1",
            "championId": 103,
            "champLevel": 17,
            "win": True,
            "kills": 9,
            "deaths": 1,
            "assists": 6,
            "totalMinionsKilled": 201,
            "item0": 6672,
            "item6": 3340,
            "summoner1Id": 4,
            "summoner2Id": 14,
            "riotIdGameName": "Faker",
            "riotIdTagline": "KR1",
            "teamId": 100,
        },
        {"puuid": "p-2", "championId": "62", "win": False},
    ],
}


def api(routes):
    def handler(request: httpx.Request) -> httpx.Response:
        status, body = routes[request.url.path]
        return httpx.Response(status, json=body)

    return BackendAPIClient(
        BASE_URL,
        "secret",
        retry=RetryPolicy(max_attempts=1, backoff_base_ms=0, backoff_factor=1.0),
        transport=httpx.MockTransport(handler),
    )


def test_parse_match_maps_camel_case_fields():
    match = MatchRepository.parse_match(MATCH_ROW)

    assert match.game_id == 7001
    assert match.summary.duration == 1720
    assert match.summary.queue_id == 420
    me = match.find_participant("p-1")
    assert (me.kills, me.deaths, me.assists) == (9, 1, 6)
    assert me.items == (6672, 0, 0, 0, 0, 0)
    assert me.item6 == 3340
    assert me.summoner_spells == (4, 14)
    assert me.team_id == 100
    other = match.find_participant("p-2")
    assert other.champion_id == 62
    assert other.team_id is None
    assert other.riot_id_game_name == ""


def test_parse_match_tolerates_missing_optional_fields():
    match = MatchRepository.parse_match({"summary": {"gameId": "42"}})
    assert match.game_id == 42
    assert match.summary.started_at is None
    assert match.started_at == 0
    assert match.participants == ()


def test_parse_match_without_game_id_is_none():
    assert MatchRepository.parse_match({"summary": {}}) is None


async def test_match_repository_skips_malformed_rows():
    async with api({"/api/v0/riot/matches": (200, {"matches": [MATCH_ROW, {"summary": {}}]})}) as client:
        matches = await MatchRepository(client).list_matches("p-1", MatchFilter(queue_id=420), 10, 0)
    assert [m.game_id for m in matches] == [7001]


async def test_account_repository_parses_accounts():
    body = {
        "accounts": [
            {"puuid": "p-1", "gameName": "Faker", "tagLine": "KR1", "region": "kr", "streamerId": 3},
            {"gameName": "no puuid"},
        ]
    }
    async with api({"/api/v0/riot/accounts": (200, body)}) as client:
        accounts = await AccountRepository(client).list_accounts()

    assert len(accounts) == 1
    account = accounts[0]
    assert account.riot_id == "Faker#KR1"
    assert account.region is Region.KR
    assert account.streamer_id == 3


async def test_rank_repository_parses_rank_and_handles_absence():
    body = {"tier": "GOLD", "rank": "II", "leaguePoints": 55, "wins": 10, "losses": 8}
    async with api({"/api/v0/riot/accounts/p-1/rank-at-time": (200, body)}) as client:
        rank = await RankRepository(client).get_rank_at_time("p-1", 420, 1)
    assert rank.tier is Tier.GOLD
    assert rank.display == "Gold II"
    assert rank.puuid == "p-1"

    async with api({"/api/v0/riot/accounts/p-1/rank-at-time": (404, {"error": "none"})}) as client:
        assert await RankRepository(client).get_rank_at_time("p-1", 420, 1) is None


def test_apex_and_unknown_tiers():
    assert RankRepository.parse_rank({"tier": "CHALLENGER", "rank": "I"}).display == "Challenger"
    assert RankRepository.parse_rank({"tier": "WOOD"}) is None


async def test_asset_repository_proxies_datadragon_documents():
    routes = {
        "/api/v0/datadragon/version": (200, {"version": "14.1.1"}),
        "/api/v0/datadragon/champions": (200, {"data": {"Ahri": {"key": "103"}}}),
        "/api/v0/datadragon/items": (200, {"data": {}}),
        "/api/v0/datadragon/summoner-spells": (200, {"data": {}}),
    }
    async with api(routes) as client:
        repo = AssetRepository(client)
        assert await repo.get_version() == "14.1.1"
        assert (await repo.get_champions())["data"]["Ahri"]["key"] == "103"
        assert await repo.get_items() == {"data": {}}
        assert await repo.get_summoner_spells() == {"data": {}}
