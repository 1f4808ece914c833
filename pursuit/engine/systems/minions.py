from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.locations import Location
    from ...models.state import GameState
    from ...models.turns import TurnRecord

from ...models.locations import Place, is_unresolved
from ..logging.logger import log_clamped


def add_trap(state: GameState, record: TurnRecord, where: Location) -> GameState:
    if not isinstance(where, Place):
        return state
    traps = state.minions.trap_counts()
    traps[where.abbrev] = traps.get(where.abbrev, 0) + 1
    return state.model_copy(update={"minions": state.minions.with_trap_counts(traps)})


def remove_trap(state: GameState, record: TurnRecord, where: Location, reason: str) -> GameState:
    """One trap fewer at ``where``; the count never goes below zero.

    Obscured locations are skipped quietly. A trail slot that was never
    filled is reported like any other missing trap.
    """
    if is_unresolved(where):
        log_clamped(state, record, f"{reason}: no location recorded at that point of the trail")
        return state
    if not isinstance(where, Place):
        return state
    traps = state.minions.trap_counts()
    count = traps.get(where.abbrev, 0)
    if count <= 0:
        log_clamped(state, record, f"{reason}: no trap left at {where.abbrev}")
        return state
    traps[where.abbrev] = count - 1
    return state.model_copy(update={"minions": state.minions.with_trap_counts(traps)})


def place_vampire(state: GameState, record: TurnRecord, where: Location) -> GameState:
    if not isinstance(where, Place):
        return state
    current = state.minions.vampire
    if current is not None and current != where:
        log_clamped(state, record, f"vampire at {current.abbrev} replaced by one at {where.abbrev}")
    return state.model_copy(update={"minions": state.minions.model_copy(update={"vampire": where})})


def clear_vampire(state: GameState) -> GameState:
    if state.minions.vampire is None:
        return state
    return state.model_copy(update={"minions": state.minions.model_copy(update={"vampire": None})})
