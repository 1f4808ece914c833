from __future__ import annotations

from pydantic import BaseModel, Field

from .enums import Perspective, PlayerId, Terrain, Transport

# ----- API IO -----


class ReplayRequest(BaseModel):
    plays: str = ""
    messages: list[str] | None = None


class ReachableRequest(ReplayRequest):
    player: PlayerId
    road: bool = True
    rail: bool = True
    sea: bool = True
    # defaults to wherever the view places the player
    from_location: str | None = Field(default=None, min_length=2, max_length=2)


class PlayerSummary(BaseModel):
    player: PlayerId
    name: str
    health: int
    location: str
    trail: list[str]


class ViewSummary(BaseModel):
    perspective: Perspective
    round: int
    current_player: PlayerId
    score: int
    players: list[PlayerSummary]
    traps: dict[str, int] | None = None
    vampire: str | None = None


class ReachableResponse(BaseModel):
    player: PlayerId
    round: int
    locations: list[str]


class PlaceInfo(BaseModel):
    id: int
    abbrev: str
    name: str
    terrain: Terrain


class MapInfo(BaseModel):
    places: list[PlaceInfo]
    edges: dict[Transport, int]
    hospital: str
    castle: str
