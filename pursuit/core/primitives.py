from __future__ import annotations
from typing import Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from pursuit.config import GameRules
    from pursuit.models.enums import PlayerId
    from pursuit.models.locations import Location, Place
    from pursuit.models.map import LocationGraph
    from pursuit.models.trail import Trail


class DecodeError(ValueError):
    """A replay log that cannot be decoded; no partial state is returned."""

    def __init__(self, message: str, *, turn: int | None = None, token: str | None = None):
        self.turn = turn
        self.token = token
        where = f"turn {turn} ({token!r}): " if turn is not None else ""
        super().__init__(f"{where}{message}")


class QueryError(ValueError):
    """A query made with an argument outside what the view knows about."""


class IGameView(Protocol):
    """Read-only query surface shared by both projections."""
    graph: LocationGraph
    rules: GameRules

    @property
    def round(self) -> int: ...
    @property
    def current_player(self) -> PlayerId: ...
    @property
    def score(self) -> int: ...
    def health(self, player: int) -> int: ...
    def location(self, player: int) -> Location: ...
    def trail(self, player: int) -> Trail: ...
    def moves(self, player: int) -> Trail: ...
    def last_move(self, player: int) -> Tuple[Location, Location]: ...
    def whats_there(self, where: Place) -> Tuple[int, int]: ...
