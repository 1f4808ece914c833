from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.map import LocationGraph

from ..config import DEFAULT_RULES, GameRules
from ..engine.core import ReplayEngine
from ..models.enums import ADVERSARY, Perspective, PlayerId
from ..models.locations import Location, is_unresolved
from .base import GameView


class PursuerView(GameView):
    """A hunter's view: Dracula is only known as far as the log gives him away.

    ``location(DRACULA)`` is the best guess from the trail, which may be
    ``CITY_UNKNOWN`` or ``SEA_UNKNOWN``. When not even that is known the
    logged marker (hide, double back, teleport) is returned instead.
    """

    perspective = Perspective.PURSUER

    @classmethod
    def from_plays(
        cls,
        plays: str,
        messages: Sequence[str] | None = None,
        *,
        graph: LocationGraph | None = None,
        rules: GameRules = DEFAULT_RULES,
    ) -> PursuerView:
        engine = ReplayEngine(graph, rules)
        return cls(engine.decode(plays, messages, perspective=cls.perspective), engine.graph)

    def who_am_i(self) -> PlayerId:
        return self.current_player

    def _adversary_location(self) -> Location:
        best = self.state.adversary_trail.most_recent
        if is_unresolved(best):
            return self.state.player(ADVERSARY).location
        return best
