from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import MarkerKind, Terrain

MIN_DOUBLE_BACK = 1
MAX_DOUBLE_BACK = 5


class Place(BaseModel):
    """A named location on the board."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["place"] = "place"
    id: int = Field(ge=0)
    name: str
    abbrev: str = Field(min_length=2, max_length=2)
    terrain: Terrain = Terrain.CITY

    @property
    def is_sea(self) -> bool:
        return self.terrain == Terrain.SEA

    def __str__(self) -> str:
        return self.abbrev


class Marker(BaseModel):
    """An obscured or absent location: what the log says instead of a place."""

    model_config = ConfigDict(frozen=True)

    kind: MarkerKind
    back: int | None = None  # only for DOUBLE_BACK

    @model_validator(mode="after")
    def _check_back(self) -> Marker:
        if self.kind == MarkerKind.DOUBLE_BACK:
            if self.back is None or not MIN_DOUBLE_BACK <= self.back <= MAX_DOUBLE_BACK:
                raise ValueError(
                    f"double back must be {MIN_DOUBLE_BACK}..{MAX_DOUBLE_BACK}, got {self.back}"
                )
        elif self.back is not None:
            raise ValueError(f"{self.kind.value} marker takes no back distance")
        return self

    def __str__(self) -> str:
        if self.kind == MarkerKind.DOUBLE_BACK:
            return f"D{self.back}"
        return self.kind.value


Location = Union[Place, Marker]

UNKNOWN = Marker(kind=MarkerKind.UNKNOWN)
NOWHERE = Marker(kind=MarkerKind.NOWHERE)
CITY_UNKNOWN = Marker(kind=MarkerKind.CITY_UNKNOWN)
SEA_UNKNOWN = Marker(kind=MarkerKind.SEA_UNKNOWN)
HIDE = Marker(kind=MarkerKind.HIDE)
TELEPORT = Marker(kind=MarkerKind.TELEPORT)


def double_back(n: int) -> Marker:
    return Marker(kind=MarkerKind.DOUBLE_BACK, back=n)


def is_place(loc: Location) -> bool:
    return isinstance(loc, Place)


def is_hide(loc: Location) -> bool:
    return isinstance(loc, Marker) and loc.kind == MarkerKind.HIDE


def is_double_back(loc: Location) -> bool:
    return isinstance(loc, Marker) and loc.kind == MarkerKind.DOUBLE_BACK


def is_unresolved(loc: Location) -> bool:
    """True when nothing at all is known, not even the terrain."""
    return loc == UNKNOWN or loc == NOWHERE
