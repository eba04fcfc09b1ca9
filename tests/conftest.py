from __future__ import annotations

import pytest

from application.services.asset_catalog import AssetCatalogResolver
from application.services.match_transformer import MatchTransformer
from application.services.rank import RankLookupAdapter
from tests.factories import CDN, PLACEHOLDER, FakeAssetRepository, FakeRankRepository

NOW = 1_700_000_000 + 2 * 3600


@pytest.fixture
def asset_repo() -> FakeAssetRepository:
    return FakeAssetRepository()


@pytest.fixture
def resolver(asset_repo: FakeAssetRepository) -> AssetCatalogResolver:
    return AssetCatalogResolver(asset_repo, cdn_url=CDN, placeholder=PLACEHOLDER)


@pytest.fixture
def rank_repo() -> FakeRankRepository:
    return FakeRankRepository()


@pytest.fixture
def transformer(resolver: AssetCatalogResolver, rank_repo: FakeRankRepository) -> MatchTransformer:
    return MatchTransformer(resolver, RankLookupAdapter(rank_repo), clock=lambda: NOW)
