from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .enums import Terrain, Transport
from .locations import Location, Place


class Edge(BaseModel):
    """Undirected unit-length connection between two places."""

    model_config = ConfigDict(frozen=True)

    start: str  # place abbreviation
    end: str
    transport: Transport


class LocationGraph(BaseModel):
    """Static multi-transport board.

    Every direct edge has length 1. Shortest rail distances between all pairs
    are computed once when the graph is built and shared by every query.
    """

    model_config = ConfigDict(frozen=True)

    places: tuple[Place, ...]
    edges: tuple[Edge, ...] = Field(default_factory=tuple)
    hospital_abbrev: str = "JM"
    castle_abbrev: str = "CD"

    _by_abbrev: dict[str, Place] = PrivateAttr(default_factory=dict)
    _by_name: dict[str, Place] = PrivateAttr(default_factory=dict)
    _adjacency: dict[Transport, list[set[int]]] = PrivateAttr(default_factory=dict)
    _rail: list[list[int]] = PrivateAttr(default_factory=list)

    def _check_board(self) -> None:
        for i, p in enumerate(self.places):
            if p.id != i:
                raise ValueError(f"place {p.abbrev} has id {p.id}, expected {i}")
        abbrevs = [p.abbrev for p in self.places]
        if len(set(abbrevs)) != len(abbrevs):
            raise ValueError("duplicate place abbreviations")
        known = set(abbrevs)
        for e in self.edges:
            if e.start not in known or e.end not in known:
                raise ValueError(f"edge {e.start}-{e.end} names an unknown place")
            if e.start == e.end:
                raise ValueError(f"self loop at {e.start}")
        for required in (self.hospital_abbrev, self.castle_abbrev):
            if required not in known:
                raise ValueError(f"board has no {required} location")

    def model_post_init(self, _context: Any) -> None:
        from ..engine.systems.pathfinding import floyd_warshall

        self._check_board()
        self._by_abbrev = {p.abbrev: p for p in self.places}
        self._by_name = {p.name: p for p in self.places}
        n = len(self.places)
        self._adjacency = {t: [set() for _ in range(n)] for t in Transport}
        for e in self.edges:
            a, b = self._by_abbrev[e.start].id, self._by_abbrev[e.end].id
            self._adjacency[e.transport][a].add(b)
            self._adjacency[e.transport][b].add(a)
        self._rail = floyd_warshall(self._adjacency[Transport.RAIL], self.unreachable)

    # ---- lookups ----

    def __len__(self) -> int:
        return len(self.places)

    def __contains__(self, loc: object) -> bool:
        return isinstance(loc, Place) and loc.id < len(self.places) and self.places[loc.id] == loc

    def find(self, abbrev: str) -> Place | None:
        return self._by_abbrev.get(abbrev)

    def place(self, abbrev: str) -> Place:
        p = self._by_abbrev.get(abbrev)
        if p is None:
            raise KeyError(f"Unknown location: {abbrev}")
        return p

    def by_name(self, name: str) -> Place:
        p = self._by_name.get(name)
        if p is None:
            raise KeyError(f"Unknown location: {name}")
        return p

    def by_id(self, place_id: int) -> Place:
        if not 0 <= place_id < len(self.places):
            raise KeyError(f"Unknown location id: {place_id}")
        return self.places[place_id]

    @property
    def hospital(self) -> Place:
        return self._by_abbrev[self.hospital_abbrev]

    @property
    def castle(self) -> Place:
        return self._by_abbrev[self.castle_abbrev]

    def terrain_of(self, loc: Location) -> Terrain | None:
        return loc.terrain if isinstance(loc, Place) else None

    # ---- distances ----

    @property
    def unreachable(self) -> int:
        """Rail distance reported for pairs with no rail path."""
        n = max(len(self.places), 2)
        return n * n

    def distance(self, a: Place, b: Place, transport: Transport) -> int | None:
        """Length of the direct edge from a to b, or None when there is none."""
        return 1 if b.id in self._adjacency[transport][a.id] else None

    def neighbours(self, a: Place, transport: Transport) -> set[Place]:
        return {self.places[i] for i in self._adjacency[transport][a.id]}

    def rail_distance(self, a: Place, b: Place) -> int:
        return self._rail[a.id][b.id]

    def rail_row(self, a: Place) -> list[int]:
        return self._rail[a.id]

    def edge_count(self, transport: Transport) -> int:
        return sum(1 for e in self.edges if e.transport == transport)
