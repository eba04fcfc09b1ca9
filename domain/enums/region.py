"""Region enumeration for League of Legends servers."""
from enum import Enum
from typing import Optional


class Region(Enum):
    """League of Legends platform servers a tracked account can live on."""

    # Europe
    EUW1 = "euw1"
    EUN1 = "eun1"
    TR1 = "tr1"
    RU = "ru"
    ME1 = "me1"

    # Americas
    NA1 = "na1"
    BR1 = "br1"
    LA1 = "la1"
    LA2 = "la2"

    # Asia
    KR = "kr"
    JP1 = "jp1"

    # SEA & Oceania
    OC1 = "oc1"
    SG2 = "sg2"
    TW2 = "tw2"
    VN2 = "vn2"

    @property
    def friendly(self) -> str:
        """Short label shown next to a riot id, e.g. ``euw``."""
        mapping = {
            "eun1": "eune",
            "la1": "lan",
            "la2": "las",
            "oc1": "oce",
        }
        if self.value in mapping:
            return mapping[self.value]
        code = self.value
        if code and code[-1].isdigit():
            return code[:-1]
        return code

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional['Region']:
        """Accept platform ids (``euw1``) or friendly labels (``euw``)."""
        if not value:
            return None
        needle = value.strip().lower()
        for region in cls:
            if needle in (region.value, region.friendly):
                return region
        return None
