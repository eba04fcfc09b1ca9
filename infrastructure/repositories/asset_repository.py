"""Data Dragon metadata repository implementation."""
from typing import Any, Dict

from domain.interfaces import IAssetRepository
from infrastructure.api import BackendAPIClient


class AssetRepository(IAssetRepository):
    """Serves the backend's proxied Data Dragon documents, latest version."""

    def __init__(self, api_client: BackendAPIClient):
        self.api_client = api_client

    async def get_version(self) -> str:
        return await self.api_client.get_datadragon_version()

    async def get_champions(self) -> Dict[str, Any]:
        return await self.api_client.get_champion_data()

    async def get_items(self) -> Dict[str, Any]:
        return await self.api_client.get_item_data()

    async def get_summoner_spells(self) -> Dict[str, Any]:
        return await self.api_client.get_summoner_spell_data()
