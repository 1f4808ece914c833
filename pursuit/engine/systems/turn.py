from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...config import GameRules
    from ...models.map import LocationGraph
    from ...models.state import GameState

from ...models.enums import PlayerId
from .health import needs_discharge

FIRST_ROUND = 0


def next_round_for(round_: int, current: PlayerId, player: PlayerId) -> int:
    """Round in which ``player`` makes their next move."""
    return round_ if player >= current else round_ + 1


def rail_allowance(rules: GameRules, round_: int, player: PlayerId) -> int:
    """How many rail edges a hunter may travel this round."""
    return (round_ + int(player)) % rules.rail_restrict


def discharge_current_player(state: GameState, graph: LocationGraph) -> GameState:
    """Heal a hunter whose turn it now is and who is still in hospital."""
    current = state.current_player
    if current.is_adversary:
        return state
    ps = state.player(current)
    if not needs_discharge(graph, ps.location, ps.health):
        return state
    return state.with_player(ps.model_copy(update={"health": state.rules.hunter_start_health}))
