import asyncio

import pytest

from application.services.asset_catalog import AssetCatalogResolver
from domain.exceptions import UpstreamUnavailableError
from tests.factories import CATALOG_VERSION, CDN, PLACEHOLDER, FakeAssetRepository


async def test_concurrent_ensure_catalog_fetches_each_document_once():
    gate = asyncio.Event()
    repo = FakeAssetRepository(gate=gate)
    resolver = AssetCatalogResolver(repo, cdn_url=CDN, placeholder=PLACEHOLDER)

    first = asyncio.create_task(resolver.ensure_catalog())
    second = asyncio.create_task(resolver.ensure_catalog())
    await asyncio.sleep(0)
    gate.set()
    a, b = await asyncio.gather(first, second)

    assert a is b
    assert repo.calls == {"version": 1, "champions": 1, "items": 1, "spells": 1}


async def test_cached_catalog_is_returned_without_refetching(resolver, asset_repo):
    catalog = await resolver.ensure_catalog()
    again = await resolver.ensure_catalog()

    assert again is catalog
    assert catalog.version == CATALOG_VERSION
    assert asset_repo.calls["version"] == 1


async def test_lookups_build_versioned_cdn_urls(resolver):
    await resolver.ensure_catalog()

    assert resolver.champion_icon_url(62) == f"{CDN}/{CATALOG_VERSION}/img/champion/MonkeyKing.png"
    assert resolver.item_icon_url(6672) == f"{CDN}/{CATALOG_VERSION}/img/item/6672.png"
    assert resolver.spell_icon_url(4) == f"{CDN}/{CATALOG_VERSION}/img/spell/SummonerFlash.png"
    assert resolver.champion_name(62) == "Wukong"


async def test_unknown_ids_resolve_to_placeholder(resolver):
    await resolver.ensure_catalog()

    assert resolver.champion_icon_url(99999) == PLACEHOLDER
    assert resolver.item_icon_url(424242) == PLACEHOLDER
    assert resolver.spell_icon_url(-1) == PLACEHOLDER
    assert resolver.champion_name(99999) == ""


def test_empty_item_slot_is_placeholder_before_any_load(resolver, asset_repo):
    assert resolver.item_icon_url(0) == PLACEHOLDER
    assert resolver.champion_icon_url(103) == PLACEHOLDER
    assert asset_repo.calls["version"] == 0


async def test_empty_item_slot_is_placeholder_after_load(resolver):
    await resolver.ensure_catalog()
    assert resolver.item_icon_url(0) == PLACEHOLDER


async def test_failed_load_is_not_cached_and_next_call_retries():
    repo = FakeAssetRepository(fail_times=1)
    resolver = AssetCatalogResolver(repo, cdn_url=CDN, placeholder=PLACEHOLDER)

    with pytest.raises(UpstreamUnavailableError):
        await resolver.ensure_catalog()
    assert not resolver.is_loaded

    catalog = await resolver.ensure_catalog()
    assert catalog.version == CATALOG_VERSION
    assert repo.calls["version"] == 2


async def test_failed_load_reaches_every_waiting_caller():
    gate = asyncio.Event()
    repo = FakeAssetRepository(fail_times=1, gate=gate)
    resolver = AssetCatalogResolver(repo, cdn_url=CDN, placeholder=PLACEHOLDER)

    waiters = [asyncio.create_task(resolver.ensure_catalog()) for _ in range(3)]
    await asyncio.sleep(0)
    gate.set()
    results = await asyncio.gather(*waiters, return_exceptions=True)

    assert all(isinstance(r, UpstreamUnavailableError) for r in results)
    assert repo.calls["version"] == 1


async def test_entries_without_numeric_key_are_skipped():
    class PartialRepo(FakeAssetRepository):
        async def get_champions(self):
            return {"data": {"Broken": {"id": "Broken", "key": "n/a"}, "Ahri": {"id": "Ahri", "key": "103"}}}

    resolver = AssetCatalogResolver(PartialRepo(), cdn_url=CDN, placeholder=PLACEHOLDER)
    catalog = await resolver.ensure_catalog()

    assert dict(catalog.champions) == {103: "Ahri.png"}
