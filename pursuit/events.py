"""Replay diagnostics channel.

The decoder reports what it did (each applied turn, every clamped invariant,
a failed decode) as ``ReplayEvent`` objects on ``event_bus``. Nothing in the
fold depends on who is listening; ``logging_listeners`` forwards events to
stdlib logging and tests subscribe to inspect them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from pursuit.models.enums import Perspective, PlayerId, ReplayEventKind


@dataclass
class ReplayEvent:
    perspective: Perspective
    turn: int  # token index in the log, -1 when the whole log is at fault
    player: PlayerId | None
    kind: ReplayEventKind
    token: str | None = None
    message: str | None = None


E = TypeVar("E")


class EventBus:
    """Synchronous fan-out keyed by event class."""

    def __init__(self) -> None:
        self._listeners: dict[type[Any], list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def unsubscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: Any) -> None:
        # a listener may unsubscribe while the replay is still emitting
        for listener in list(self._listeners.get(type(event), [])):
            # errors surface in the decode that emitted the event
            listener(event)


event_bus = EventBus()
