import pytest

from pursuit.engine.systems.pathfinding import floyd_warshall
from pursuit.models.enums import Terrain, Transport
from pursuit.models.locations import HIDE, Place
from pursuit.models.map import Edge, LocationGraph


def _tiny(edges, places=("AA", "BB", "JM", "CD")) -> LocationGraph:
    return LocationGraph(
        places=tuple(Place(id=i, name=a, abbrev=a) for i, a in enumerate(places)),
        edges=tuple(Edge(start=a, end=b, transport=t) for a, b, t in edges),
    )


def test_bundled_board_shape(graph):
    assert len(graph) == 71
    assert graph.hospital.abbrev == "JM"
    assert graph.castle.terrain == Terrain.CASTLE
    assert graph.place("BS").is_sea
    assert [p.id for p in graph.places] == list(range(71))


def test_lookups(graph):
    ma = graph.place("MA")
    assert graph.by_name("Madrid") == ma
    assert graph.by_id(ma.id) == ma
    assert graph.find("XX") is None
    with pytest.raises(KeyError):
        graph.place("XX")
    with pytest.raises(KeyError):
        graph.by_id(71)
    assert ma in graph
    assert HIDE not in graph
    assert graph.terrain_of(HIDE) is None


def test_direct_distance_per_transport(graph):
    lo, mn, pa = graph.place("LO"), graph.place("MN"), graph.place("PA")
    assert graph.distance(lo, mn, Transport.ROAD) == 1
    assert graph.distance(mn, lo, Transport.ROAD) == 1
    assert graph.distance(lo, pa, Transport.ROAD) is None
    assert graph.distance(graph.place("BS"), graph.place("CN"), Transport.SEA) == 1


def test_neighbours(graph):
    sz = graph.place("SZ")
    assert {p.abbrev for p in graph.neighbours(sz, Transport.ROAD)} == {"BE", "BD", "KL", "JM", "ZA"}
    assert {p.abbrev for p in graph.neighbours(graph.place("BS"), Transport.SEA)} == {"CN", "IO", "VR"}
    assert graph.neighbours(graph.place("BS"), Transport.ROAD) == set()


def test_rail_distances(graph):
    ma = graph.place("MA")
    assert graph.rail_distance(ma, ma) == 0
    assert graph.rail_distance(ma, graph.place("SR")) == 1
    assert graph.rail_distance(ma, graph.place("BO")) == 2
    assert graph.rail_distance(ma, graph.place("PA")) == 3
    # symmetric
    for a in ("MA", "LO", "BE", "VI"):
        for b in ("PA", "SZ", "MI"):
            assert graph.rail_distance(graph.place(a), graph.place(b)) == graph.rail_distance(
                graph.place(b), graph.place(a)
            )
    # no rails at sea
    assert graph.rail_distance(graph.place("BS"), ma) == graph.unreachable
    assert graph.unreachable == 71 * 71


def test_edge_counts(graph):
    assert graph.edge_count(Transport.ROAD) > graph.edge_count(Transport.RAIL) > 0
    assert graph.edge_count(Transport.SEA) > 0


def test_floyd_warshall_small():
    # 0 - 1 - 2, 3 on its own
    adj = [{1}, {0, 2}, {1}, set()]
    d = floyd_warshall(adj, 99)
    assert d[0] == [0, 1, 2, 99]
    assert d[2][0] == 2
    assert d[3] == [99, 99, 99, 0]


def test_board_validation():
    g = _tiny([("AA", "BB", Transport.RAIL), ("BB", "JM", Transport.RAIL)])
    assert g.rail_distance(g.place("AA"), g.place("JM")) == 2
    assert g.rail_distance(g.place("AA"), g.place("CD")) == 16

    with pytest.raises(ValueError, match="duplicate"):
        _tiny([], places=("AA", "AA", "JM", "CD"))
    with pytest.raises(ValueError, match="unknown place"):
        _tiny([("AA", "ZZ", Transport.ROAD)])
    with pytest.raises(ValueError, match="self loop"):
        _tiny([("AA", "AA", Transport.ROAD)])
    with pytest.raises(ValueError, match="no CD"):
        _tiny([], places=("AA", "BB", "JM"))
