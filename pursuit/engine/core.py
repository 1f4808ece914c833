from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.map import LocationGraph
    from .actions.base import Registry

from ..config import DEFAULT_RULES, GameRules
from ..core.primitives import DecodeError
from ..models.enums import Perspective
from ..models.state import GameState
from ..models.turns import AdversaryTurn, PursuerTurn, TurnRecord
from .actions.adversary import AdversaryTurnHandler
from .actions.pursuer import PursuerTurnHandler
from .logging.logger import log_applied, log_error
from .parser import parse_plays
from .systems import turn

default_handlers: Registry = {
    AdversaryTurn: AdversaryTurnHandler(),
    PursuerTurn: PursuerTurnHandler(),
}


class ReplayEngine:
    """Folds a decoded log into a ``GameState``.

    One engine can serve any number of replays; it holds no per-game state.
    """

    def __init__(
        self,
        graph: LocationGraph | None = None,
        rules: GameRules = DEFAULT_RULES,
        handlers: Registry | None = None,
    ):
        if graph is None:
            from ..maps.europe import default_map

            graph = default_map()
        self.graph = graph
        self.rules = rules
        self.handlers: Registry = handlers or default_handlers

    def decode(
        self,
        plays: str,
        messages: Sequence[str] | None = None,
        *,
        perspective: Perspective,
    ) -> GameState:
        try:
            records = parse_plays(
                plays, graph=self.graph, perspective=perspective, rules=self.rules
            )
            kept = self._messages(messages, len(records))
            state = reduce(self.step, records, GameState.initial(perspective, self.rules))
        except DecodeError as e:
            log_error(perspective, e, turn=-1 if e.turn is None else e.turn, token=e.token)
            raise
        state = turn.discharge_current_player(state, self.graph)
        return state.model_copy(update={"records": records, "messages": kept})

    def step(self, state: GameState, record: TurnRecord) -> GameState:
        h = self.handlers.get(type(record))
        if not h:
            raise DecodeError("no handler for play", turn=record.index, token=record.token)
        new_state = h.apply(state, record, self.graph)
        new_state = new_state.model_copy(update={"turns": state.turns + 1})
        log_applied(new_state, record)
        return new_state

    def _messages(self, messages: Sequence[str] | None, n_plays: int) -> tuple[str, ...]:
        if messages is None:
            return ()
        if len(messages) < n_plays:
            raise DecodeError(f"{n_plays} plays but only {len(messages)} messages")
        limit = self.rules.max_message_length
        return tuple(m[:limit] for m in messages[:n_plays])


def replay(
    plays: str,
    messages: Sequence[str] | None = None,
    *,
    perspective: Perspective = Perspective.ADVERSARY,
    graph: LocationGraph | None = None,
    rules: GameRules = DEFAULT_RULES,
) -> GameState:
    return ReplayEngine(graph, rules).decode(plays, messages, perspective=perspective)
