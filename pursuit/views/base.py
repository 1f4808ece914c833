from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import GameRules
    from ..models.map import LocationGraph
    from ..models.state import GameState
    from ..models.trail import Trail

from ..core.primitives import QueryError
from ..engine.systems import movement
from ..models.enums import ADVERSARY, Perspective, PlayerId
from ..models.locations import Location, Place


class GameView:
    """Read-only queries over a decoded ``GameState``.

    Subclasses decide how much of Dracula's whereabouts can be resolved.
    """

    perspective: Perspective

    def __init__(self, state: GameState, graph: LocationGraph):
        if state.perspective != self.perspective:
            raise QueryError(
                f"{type(self).__name__} needs a {self.perspective.value} replay, "
                f"got {state.perspective.value}"
            )
        self.state = state
        self.graph = graph

    @property
    def rules(self) -> GameRules:
        return self.state.rules

    # ---- game summary ----

    @property
    def round(self) -> int:
        return self.state.round

    @property
    def current_player(self) -> PlayerId:
        return self.state.current_player

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def messages(self) -> tuple[str, ...]:
        return self.state.messages

    def health(self, player: int) -> int:
        return self.state.player(movement.as_player(player)).health

    # ---- whereabouts ----

    def location(self, player: int) -> Location:
        p = movement.as_player(player)
        if p == ADVERSARY:
            return self._adversary_location()
        return self.state.player(p).location

    def _adversary_location(self) -> Location:
        raise NotImplementedError

    def trail(self, player: int) -> Trail:
        """Last locations of ``player``, most recent first."""
        p = movement.as_player(player)
        if p == ADVERSARY:
            return self.state.adversary_trail
        return self.state.histories[p]

    def moves(self, player: int) -> Trail:
        """Last moves of ``player`` exactly as logged, markers included."""
        return self.state.histories[movement.as_player(player)]

    def last_move(self, player: int) -> tuple[Location, Location]:
        """(start, end) of the player's most recent move."""
        m = self.moves(player)
        return m.at(1), m.at(0)

    def whats_there(self, where: Place) -> tuple[int, int]:
        """(traps, immature vampires) known to be at ``where``."""
        if not isinstance(where, Place) or where not in self.graph:
            raise QueryError(f"{where} is not a location on the board")
        m = self.state.minions
        return m.traps_at(where), m.vampires_at(where)

    # ---- movement ----

    def where_can_i_go(self, *, road: bool = True, rail: bool = True, sea: bool = True) -> set[Place]:
        return movement.where_can_i_go(self, road=road, rail=rail, sea=sea)

    def where_can_they_go(
        self, player: int, *, road: bool = True, rail: bool = True, sea: bool = True
    ) -> set[Place]:
        return movement.where_can_they_go(self, player, road=road, rail=rail, sea=sea)
