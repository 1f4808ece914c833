from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .enums import ADVERSARY, AdversaryAction, Encounter, PlayerId
from .locations import Location, Place

# ----- Decoded plays (one per log token) -----


class AdversaryTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["adversary"] = "adversary"
    index: int = Field(ge=0)  # position in the log
    token: str
    player: PlayerId = ADVERSARY
    move: Location  # as logged: a place or an obscured-move marker
    trap_placed: bool = False
    vampire_placed: bool = False
    action: AdversaryAction | None = None


class PursuerTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["pursuer"] = "pursuer"
    index: int = Field(ge=0)
    token: str
    player: PlayerId
    move: Place
    encounters: tuple[Encounter, ...] = ()


TurnRecord = Union[AdversaryTurn, PursuerTurn]
