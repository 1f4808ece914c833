# Shared fixtures: the bundled board and a tap on the replay event bus.

import logging
from collections.abc import Iterator

import pytest

from pursuit.events import ReplayEvent, event_bus
from pursuit.maps.europe import default_map
from pursuit.models.map import LocationGraph

logger = logging.getLogger(__name__)


@pytest.fixture(scope="session")
def graph() -> LocationGraph:
    g = default_map()
    logger.info("[tests] Board loaded: %s places, %s edges", len(g), len(g.edges))
    return g


@pytest.fixture
def events() -> Iterator[list[ReplayEvent]]:
    seen: list[ReplayEvent] = []
    event_bus.subscribe(ReplayEvent, seen.append)
    yield seen
    event_bus.unsubscribe(ReplayEvent, seen.append)
