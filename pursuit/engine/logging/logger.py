from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.state import GameState
    from ...models.turns import TurnRecord
    from ...models.enums import Perspective

from ...events import ReplayEvent, event_bus
from ...models.enums import ReplayEventKind


def log_event(
    state: GameState,
    record: TurnRecord,
    kind: ReplayEventKind,
    message: str | None = None,
) -> None:
    event_bus.emit(
        ReplayEvent(
            perspective=state.perspective,
            turn=record.index,
            player=record.player,
            kind=kind,
            token=record.token,
            message=message,
        )
    )


def log_applied(state: GameState, record: TurnRecord) -> None:
    log_event(state, record, ReplayEventKind.TURN_APPLIED)


def log_clamped(state: GameState, record: TurnRecord, explanation: str) -> None:
    log_event(state, record, ReplayEventKind.INVARIANT_CLAMPED, explanation)


def log_error(perspective: Perspective, error: Exception, *, turn: int = -1, token: str | None = None) -> None:
    event_bus.emit(
        ReplayEvent(
            perspective=perspective,
            turn=turn,
            player=None,
            kind=ReplayEventKind.DECODE_FAILED,
            token=token,
            message=str(error),
        )
    )
