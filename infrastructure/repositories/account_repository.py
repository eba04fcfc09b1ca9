"""Tracked account repository implementation."""
from typing import Any, Dict, List

from domain.entities import TrackedAccount
from domain.enums import Region
from domain.interfaces import IAccountRepository
from infrastructure.api import BackendAPIClient


class AccountRepository(IAccountRepository):
    """Repository for the accounts the signed-in user tracks."""

    def __init__(self, api_client: BackendAPIClient):
        self.api_client = api_client

    async def list_accounts(self) -> List[TrackedAccount]:
        rows = await self.api_client.list_accounts()
        return [self.parse_account(row) for row in rows if row.get('puuid')]

    @staticmethod
    def parse_account(data: Dict[str, Any]) -> TrackedAccount:
        return TrackedAccount(
            puuid=data['puuid'],
            game_name=data.get('gameName') or '',
            tag_line=data.get('tagLine') or '',
            region=Region.from_string(data.get('region')),
            streamer_id=data.get('streamerId'),
            synced_at=data.get('syncedAt'),
        )
