from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.locations import Place
    from ...models.map import LocationGraph

from ...models.enums import Transport


def floyd_warshall(adjacency: list[set[int]], unreachable: int) -> list[list[int]]:
    """All-pairs shortest path lengths over unit edges.

    Pairs with no path keep the ``unreachable`` value.
    """
    n = len(adjacency)
    dist = [
        [0 if i == j else (1 if j in adjacency[i] else unreachable) for j in range(n)]
        for i in range(n)
    ]
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            row_i = dist[i]
            d_ik = row_i[k]
            if d_ik >= unreachable:
                continue
            for j in range(n):
                d = d_ik + row_k[j]
                if d < row_i[j]:
                    row_i[j] = d
    return dist


def rail_reach(graph: LocationGraph, start: Place, max_hops: int) -> set[Place]:
    """Places within ``max_hops`` rail edges of ``start`` (start included)."""
    row = graph.rail_row(start)
    return {graph.places[i] for i, d in enumerate(row) if d <= max_hops}


def connected(
    graph: LocationGraph,
    start: Place,
    *,
    road: bool,
    rail_hops: int,
    sea: bool,
) -> set[Place]:
    reach: set[Place] = {start}
    if rail_hops > 0:
        reach |= rail_reach(graph, start, rail_hops)
    if road:
        reach |= graph.neighbours(start, Transport.ROAD)
    if sea:
        reach |= graph.neighbours(start, Transport.SEA)
    return reach
