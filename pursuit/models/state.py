from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_RULES, GameRules
from .enums import ADVERSARY, Perspective, PlayerId
from .locations import NOWHERE, Location, Place
from .trail import Trail
from .turns import TurnRecord


class PlayerState(BaseModel):
    model_config = ConfigDict(frozen=True)

    player: PlayerId
    health: int
    # What the log says: for Dracula this may be an obscured-move marker
    location: Location = NOWHERE


class MinionState(BaseModel):
    """Traps per place (by abbreviation) and the single immature vampire, if any."""

    model_config = ConfigDict(frozen=True)

    # (abbrev, count) pairs sorted by abbrev, counts always positive
    traps: tuple[tuple[str, int], ...] = ()
    vampire: Place | None = None

    def trap_counts(self) -> dict[str, int]:
        """A fresh dict copy; editing it does not touch the state."""
        return dict(self.traps)

    def traps_at(self, place: Place) -> int:
        return self.trap_counts().get(place.abbrev, 0)

    def with_trap_counts(self, counts: dict[str, int]) -> MinionState:
        kept = tuple(sorted((k, n) for k, n in counts.items() if n > 0))
        return self.model_copy(update={"traps": kept})

    def vampires_at(self, place: Place) -> int:
        return 1 if self.vampire == place else 0


class GameState(BaseModel):
    """Everything reconstructed from a replay log.

    Built once by folding the decoded turns; never updated in place.
    """

    model_config = ConfigDict(frozen=True)

    perspective: Perspective
    rules: GameRules = DEFAULT_RULES
    turns: int = 0
    score: int
    players: tuple[PlayerState, ...]
    histories: tuple[Trail, ...]  # per player, moves as logged
    adversary_trail: Trail  # Dracula's locations as resolved from this perspective
    minions: MinionState = Field(default_factory=MinionState)
    records: tuple[TurnRecord, ...] = ()
    messages: tuple[str, ...] = ()

    @classmethod
    def initial(cls, perspective: Perspective, rules: GameRules = DEFAULT_RULES) -> GameState:
        players = tuple(
            PlayerState(
                player=p,
                health=rules.dracula_start_health if p == ADVERSARY else rules.hunter_start_health,
            )
            for p in PlayerId
        )
        return cls(
            perspective=perspective,
            rules=rules,
            score=rules.start_score,
            players=players,
            histories=tuple(Trail.empty(rules.trail_size) for _ in PlayerId),
            adversary_trail=Trail.empty(rules.trail_size),
        )

    @property
    def round(self) -> int:
        return self.turns // self.rules.num_players

    @property
    def current_player(self) -> PlayerId:
        return PlayerId(self.turns % self.rules.num_players)

    def player(self, p: PlayerId) -> PlayerState:
        return self.players[p]

    def with_player(self, ps: PlayerState) -> GameState:
        players = list(self.players)
        players[ps.player] = ps
        return self.model_copy(update={"players": tuple(players)})

    def with_history(self, p: PlayerId, trail: Trail) -> GameState:
        histories = list(self.histories)
        histories[p] = trail
        return self.model_copy(update={"histories": tuple(histories)})
