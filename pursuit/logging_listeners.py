from __future__ import annotations

import logging

from .config import LOG_LEVEL
from .events import ReplayEvent, event_bus
from .models.enums import ReplayEventKind

logger = logging.getLogger("pursuit.replay")
logger.setLevel(LOG_LEVEL)

_LEVELS = {
    ReplayEventKind.TURN_APPLIED: logging.DEBUG,
    ReplayEventKind.INVARIANT_CLAMPED: logging.WARNING,
    ReplayEventKind.DECODE_FAILED: logging.ERROR,
}

_registered = False


def _on_replay_event(ev: ReplayEvent) -> None:
    # Forward diagnostics to stdlib logging
    logger.log(
        _LEVELS[ev.kind],
        "[%s] turn %s %s %s: %s",
        ev.perspective.value,
        ev.turn,
        ev.player.name if ev.player is not None else "-",
        ev.token or "",
        ev.message or ev.kind.value,
    )


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(ReplayEvent, _on_replay_event)
    _registered = True
