from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...models.map import LocationGraph
    from ...models.state import GameState
    from ...models.turns import TurnRecord


class TurnHandler(Protocol):
    record_type: type

    def apply(self, state: GameState, record: TurnRecord, graph: LocationGraph) -> GameState: ...


Registry = dict[type, TurnHandler]
