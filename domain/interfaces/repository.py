"""Repository interfaces for the backend collaborator."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..entities import MatchFilter, PlayerRank, RawMatch, TrackedAccount


class IAccountRepository(ABC):
    """Interface for tracked account data."""

    @abstractmethod
    async def list_accounts(self) -> List[TrackedAccount]:
        """Get every account the current user tracks."""
        pass


class IMatchRepository(ABC):
    """Interface for match data."""

    @abstractmethod
    async def list_matches(
        self,
        puuid: str,
        match_filter: Optional[MatchFilter] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[RawMatch]:
        """Get one page of an account's matches; may return fewer than limit."""
        pass


class IRankRepository(ABC):
    """Interface for rank history."""

    @abstractmethod
    async def get_rank_at_time(self, puuid: str, queue_id: int, timestamp: int) -> Optional[PlayerRank]:
        """Get the account's rank in a queue at a Unix-seconds timestamp."""
        pass


class IAssetRepository(ABC):
    """Interface for Data Dragon metadata documents."""

    @abstractmethod
    async def get_version(self) -> str:
        """Get the current catalog version tag."""
        pass

    @abstractmethod
    async def get_champions(self) -> Dict[str, Any]:
        """Champion document, ``data`` keyed by string id with numeric ``key``."""
        pass

    @abstractmethod
    async def get_items(self) -> Dict[str, Any]:
        """Item document, ``data`` keyed by numeric id string."""
        pass

    @abstractmethod
    async def get_summoner_spells(self) -> Dict[str, Any]:
        """Summoner spell document, ``data`` keyed by string id with numeric ``key``."""
        pass
