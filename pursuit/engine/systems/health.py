from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...config import GameRules
    from ...models.locations import Location
    from ...models.map import LocationGraph

from ...models.locations import SEA_UNKNOWN, Place


def terrain_change(rules: GameRules, graph: LocationGraph, where: Location) -> int:
    """Dracula's health change for ending a move at ``where``.

    Only terrain that is actually known counts: an unknown city is neither
    sea nor the castle.
    """
    if where == SEA_UNKNOWN or (isinstance(where, Place) and where.is_sea):
        return -rules.sea_loss
    if where == graph.castle:
        return rules.castle_gain
    return 0


def rested(rules: GameRules, health: int) -> int:
    return min(health + rules.rest_gain, rules.hunter_start_health)


def needs_discharge(graph: LocationGraph, where: Location, health: int) -> bool:
    """A hunter sent to hospital gets full health back on their next turn."""
    return where == graph.hospital and health == 0
