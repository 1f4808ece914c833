"""Where can a player legally move next.

All functions take any object with the ``IGameView`` query surface, so the
same code answers for Dracula's full view and for a hunter's partial one.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.primitives import IGameView
    from ...models.map import LocationGraph

from ...core.primitives import QueryError
from ...models.enums import ADVERSARY, PlayerId
from ...models.locations import Location, Place
from . import pathfinding
from .turn import FIRST_ROUND, next_round_for, rail_allowance


def as_player(player: int) -> PlayerId:
    try:
        return PlayerId(player)
    except ValueError:
        raise QueryError(f"no such player: {player!r}") from None


def first_round_destinations(graph: LocationGraph, player: PlayerId) -> set[Place]:
    """Before anyone is placed every location is open, bar the hospital for Dracula."""
    if player.is_adversary:
        return {p for p in graph.places if p != graph.hospital}
    return set(graph.places)


def adversary_may_enter(view: IGameView, dst: Place) -> bool:
    """Trail rules: at most one hide and one double back per trail window.

    The current location can only be re-entered by hiding, which is not
    possible at sea; any other location still on the trail needs a double back.
    """
    age = view.trail(ADVERSARY).age_of(dst)
    if age is None:
        return True
    moves = view.moves(ADVERSARY)
    if age == 0:
        return not dst.is_sea and not moves.has_hide()
    return not moves.has_double_back()


def reachable(
    view: IGameView,
    player: int,
    from_: Location,
    *,
    road: bool = True,
    rail: bool = True,
    sea: bool = True,
    round: int | None = None,
) -> set[Place]:
    """Every location ``player`` may legally end a move at, starting from ``from_``.

    ``round`` defaults to the view's current round. In the first round any
    board location may be passed as ``from_``; the result does not depend on it.
    """
    p = as_player(player)
    graph = view.graph
    if not isinstance(from_, Place) or from_ not in graph:
        raise QueryError(f"{from_} is not a location on the board")
    rnd = view.round if round is None else round
    if rnd == FIRST_ROUND:
        return first_round_destinations(graph, p)

    rail_hops = rail_allowance(view.rules, rnd, p) if rail and not p.is_adversary else 0
    reach = pathfinding.connected(graph, from_, road=road, rail_hops=rail_hops, sea=sea)
    if p.is_adversary:
        reach.discard(graph.hospital)
        reach = {dst for dst in reach if adversary_may_enter(view, dst)}
    return reach


def where_can_i_go(
    view: IGameView, *, road: bool = True, rail: bool = True, sea: bool = True
) -> set[Place]:
    """Moves open to the player whose turn it is."""
    return where_can_they_go(view, view.current_player, road=road, rail=rail, sea=sea)


def where_can_they_go(
    view: IGameView,
    player: int,
    *,
    road: bool = True,
    rail: bool = True,
    sea: bool = True,
) -> set[Place]:
    """Moves open to ``player`` on their next turn.

    Empty when the view cannot tell where that player is.
    """
    p = as_player(player)
    rnd = next_round_for(view.round, view.current_player, p)
    if rnd == FIRST_ROUND:
        return first_round_destinations(view.graph, p)
    here = view.location(p)
    if not isinstance(here, Place):
        return set()
    return reachable(view, p, here, road=road, rail=rail, sea=sea, round=rnd)
