from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.map import LocationGraph

from ..config import DEFAULT_RULES, GameRules
from ..engine.core import ReplayEngine
from ..models.enums import ADVERSARY, Perspective
from ..models.locations import Location, is_unresolved
from .base import GameView


class AdversaryView(GameView):
    """Dracula's own view: every one of his locations is known."""

    perspective = Perspective.ADVERSARY

    @classmethod
    def from_plays(
        cls,
        plays: str,
        messages: Sequence[str] | None = None,
        *,
        graph: LocationGraph | None = None,
        rules: GameRules = DEFAULT_RULES,
    ) -> AdversaryView:
        engine = ReplayEngine(graph, rules)
        return cls(engine.decode(plays, messages, perspective=cls.perspective), engine.graph)

    def _adversary_location(self) -> Location:
        here = self.state.adversary_trail.most_recent
        # NOWHERE until his first move
        return self.state.player(ADVERSARY).location if is_unresolved(here) else here
