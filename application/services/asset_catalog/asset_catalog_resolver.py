"""Versioned asset catalog: numeric game ids -> icon URLs."""
from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Tuple

from config import settings
from core.logging import get_logger
from domain.entities import AssetCatalog
from domain.interfaces import IAssetRepository

logger = get_logger(__name__, service="catalog")


class AssetCatalogResolver:
    """
    Loads the champion/item/summoner-spell metadata once per session and
    resolves ids against it.

    - The first ``ensure_catalog()`` starts a single load task; callers that
      arrive while it is running await the same task.
    - The catalog is published only after all three documents loaded.
    - A failed load is not cached: the error reaches every waiting caller and
      the next call starts a fresh load.
    - Lookups never raise; unknown ids (or a catalog that has not loaded yet)
      resolve to the placeholder.
    """

    def __init__(
        self,
        repository: IAssetRepository,
        *,
        cdn_url: Optional[str] = None,
        placeholder: Optional[str] = None,
    ) -> None:
        self.repository  = repository
        self.cdn_url     = (cdn_url or settings.DDRAGON_CDN_URL).rstrip("/")
        self.placeholder = placeholder or settings.PLACEHOLDER_ICON
        self._catalog: Optional[AssetCatalog] = None
        self._pending: Optional[asyncio.Future[AssetCatalog]] = None

    @property
    def catalog(self) -> Optional[AssetCatalog]:
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    async def ensure_catalog(self) -> AssetCatalog:
        if self._catalog is not None:
            return self._catalog

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._load())
        pending = self._pending
        try:
            # shield: one caller being cancelled must not cancel the shared load
            return await asyncio.shield(pending)
        finally:
            if pending.done() and self._pending is pending:
                self._pending = None

    async def _load(self) -> AssetCatalog:
        logger.debug("loading asset catalog")
        try:
            version = await self.repository.get_version()
            champions, items, spells = await asyncio.gather(
                self.repository.get_champions(),
                self.repository.get_items(),
                self.repository.get_summoner_spells(),
            )
        except Exception as exc:
            logger.error(lambda: f"asset catalog load failed: {exc}")
            raise

        champion_images, champion_names = self._index_by_key(champions)
        spell_images, _ = self._index_by_key(spells)
        catalog = AssetCatalog(
            version=version,
            champions=champion_images,
            champion_names=champion_names,
            items=self._index_items(items),
            spells=spell_images,
        )
        self._catalog = catalog
        logger.success(
            lambda: (
                f"asset catalog {version} loaded: {len(catalog.champions)} champions, "
                f"{len(catalog.items)} items, {len(catalog.spells)} spells"
            )
        )
        return catalog

    @staticmethod
    def _index_by_key(document: Dict[str, Any]) -> Tuple[Dict[int, str], Dict[int, str]]:
        """Champion and spell documents are keyed by string id; the numeric
        game id lives in each entry's ``key`` field."""
        images: Dict[int, str] = {}
        names: Dict[int, str] = {}
        for entry in (document.get("data") or {}).values():
            try:
                game_id = int(entry["key"])
            except (KeyError, TypeError, ValueError):
                continue
            image = (entry.get("image") or {}).get("full") or (f"{entry['id']}.png" if entry.get("id") else None)
            if not image:
                continue
            images[game_id] = image
            names[game_id] = entry.get("name") or entry.get("id") or ""
        return images, names

    @staticmethod
    def _index_items(document: Dict[str, Any]) -> Dict[int, str]:
        """Item documents are keyed by the numeric id itself."""
        images: Dict[int, str] = {}
        for id_str, entry in (document.get("data") or {}).items():
            try:
                item_id = int(id_str)
            except (TypeError, ValueError):
                continue
            image = (entry.get("image") or {}).get("full")
            if image:
                images[item_id] = image
        return images

    # ── Lookups ────────────────────────────────────────────────────────

    def _url(self, kind: str, image: Optional[str]) -> str:
        if not image or self._catalog is None:
            return self.placeholder
        return f"{self.cdn_url}/{self._catalog.version}/img/{kind}/{image}"

    def champion_icon_url(self, champion_id: int) -> str:
        if self._catalog is None:
            return self.placeholder
        return self._url("champion", self._catalog.champions.get(champion_id))

    def item_icon_url(self, item_id: int) -> str:
        # 0 is an empty slot, never a catalog entry
        if item_id == 0 or self._catalog is None:
            return self.placeholder
        return self._url("item", self._catalog.items.get(item_id))

    def spell_icon_url(self, spell_id: int) -> str:
        if self._catalog is None:
            return self.placeholder
        return self._url("spell", self._catalog.spells.get(spell_id))

    def champion_name(self, champion_id: int) -> str:
        if self._catalog is None:
            return ""
        return self._catalog.champion_names.get(champion_id, "")
