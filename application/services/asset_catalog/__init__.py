from .asset_catalog_resolver import AssetCatalogResolver

__all__ = ["AssetCatalogResolver"]
