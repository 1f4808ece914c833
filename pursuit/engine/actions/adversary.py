from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.map import LocationGraph
    from ...models.state import GameState
    from ...models.trail import Trail

from ...core.primitives import DecodeError
from ...models.enums import ADVERSARY, AdversaryAction, MarkerKind, Perspective
from ...models.locations import Location, Marker, Place
from ...models.turns import AdversaryTurn
from ..systems import health, minions
from .base import TurnHandler


def resolve_move(move: Location, trail: Trail, graph: LocationGraph) -> Location:
    """Where Dracula actually is after ``move``, as far as ``trail`` tells."""
    if isinstance(move, Place):
        return move
    if move.kind == MarkerKind.HIDE:
        return trail.most_recent
    if move.kind == MarkerKind.DOUBLE_BACK:
        return trail.at(move.back - 1)
    if move.kind == MarkerKind.TELEPORT:
        return graph.castle
    if move.kind in (MarkerKind.CITY_UNKNOWN, MarkerKind.SEA_UNKNOWN):
        return move
    raise ValueError(f"{move} is not a move")


class AdversaryTurnHandler(TurnHandler):
    record_type = AdversaryTurn

    def apply(self, state: GameState, record: AdversaryTurn, graph: LocationGraph) -> GameState:
        rules = state.rules
        trail = state.adversary_trail
        where = resolve_move(record.move, trail, graph)
        if state.perspective == Perspective.ADVERSARY and isinstance(where, Marker):
            raise DecodeError(
                f"{record.move} refers to a move before the start of the trail",
                turn=record.index,
                token=record.token,
            )

        dracula = state.player(ADVERSARY)
        hp = dracula.health + health.terrain_change(rules, graph, where)
        score = state.score

        if record.trap_placed:
            state = minions.add_trap(state, record, where)
        if record.vampire_placed:
            state = minions.place_vampire(state, record, where)
        if record.action == AdversaryAction.TRAP_MALFUNCTION:
            # the trap leaving the end of the trail
            state = minions.remove_trap(state, record, trail.oldest, "trap malfunctioned")
        elif record.action == AdversaryAction.VAMPIRE_MATURED:
            state = minions.clear_vampire(state)
            score -= rules.vampire_matures_score_loss

        state = state.with_player(dracula.model_copy(update={"health": hp, "location": record.move}))
        state = state.with_history(ADVERSARY, state.histories[ADVERSARY].push(record.move))
        return state.model_copy(update={"adversary_trail": trail.push(where), "score": score})
