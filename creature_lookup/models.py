"""Pydantic models describing normalized creature records and catalog entries."""

from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

STAT_KEYS = ("hp", "attack", "defense", "special-attack", "special-defense", "speed")


class StatBlock(BaseModel):
    """The six canonical stats. ``None`` means upstream did not supply a usable value."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hp: Optional[Number] = None
    attack: Optional[Number] = None
    defense: Optional[Number] = None
    special_attack: Optional[Number] = Field(default=None, alias="special-attack")
    special_defense: Optional[Number] = Field(default=None, alias="special-defense")
    speed: Optional[Number] = None

    def as_dict(self) -> Dict[str, Optional[Number]]:
        return self.model_dump(by_alias=True)

    def get(self, key: str) -> Optional[Number]:
        if key not in STAT_KEYS:
            raise KeyError(key)
        return self.as_dict()[key]


class SpecialAbility(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""


class CreatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    id: Optional[int] = None
    weight: Optional[Number] = None
    height: Optional[Number] = None
    types: List[str] = Field(default_factory=list)
    stats: StatBlock = Field(default_factory=StatBlock)
    special: Optional[SpecialAbility] = None


class CatalogEntry(BaseModel):
    """Minimal shape surfaced while browsing the catalog."""

    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str = ""
