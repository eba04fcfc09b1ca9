"""Versioned static asset catalog snapshot."""
from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class AssetCatalog:
    """Champion/item/spell image names keyed by numeric game id.

    Built in one go after every metadata document has loaded, so a reader
    never sees a half-populated catalog.
    """

    version: str
    champions: Mapping[int, str] = field(default_factory=dict)      # id -> image file name
    champion_names: Mapping[int, str] = field(default_factory=dict)  # id -> display name
    items: Mapping[int, str] = field(default_factory=dict)
    spells: Mapping[int, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.champions) + len(self.items) + len(self.spells)
