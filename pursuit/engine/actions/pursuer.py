from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.map import LocationGraph
    from ...models.state import GameState

from ...models.enums import ADVERSARY, Encounter
from ...models.turns import PursuerTurn
from ..systems import health, minions
from .base import TurnHandler


class PursuerTurnHandler(TurnHandler):
    record_type = PursuerTurn

    def apply(self, state: GameState, record: PursuerTurn, graph: LocationGraph) -> GameState:
        rules = state.rules
        hunter = state.player(record.player)
        dracula = state.player(ADVERSARY)

        hp = hunter.health
        if health.needs_discharge(graph, hunter.location, hp):
            hp = rules.hunter_start_health
        drac_hp = dracula.health
        score = state.score

        for enc in record.encounters:
            if enc == Encounter.TRAP:
                state = minions.remove_trap(state, record, record.move, "trap disarmed")
            elif enc == Encounter.VAMPIRE:
                state = minions.clear_vampire(state)
            # damage stops once either side is down
            if hp <= 0 or drac_hp <= 0:
                continue
            if enc == Encounter.TRAP:
                hp -= rules.trap_encounter_loss
            elif enc == Encounter.DRACULA:
                hp -= rules.dracula_encounter_loss
                drac_hp -= rules.hunter_encounter_loss

        where = record.move
        if hp <= 0:
            hp = 0
            score -= rules.hospital_score_loss
            where = graph.hospital
        elif where == hunter.location:
            hp = health.rested(rules, hp)

        state = state.with_player(hunter.model_copy(update={"health": hp, "location": where}))
        state = state.with_player(dracula.model_copy(update={"health": drac_hp}))
        state = state.with_history(record.player, state.histories[record.player].push(record.move))
        return state.model_copy(update={"score": score})
