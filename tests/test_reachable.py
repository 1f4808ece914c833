import pytest

from pursuit.core.primitives import QueryError
from pursuit.engine.systems.movement import reachable
from pursuit.models.enums import ADVERSARY, PlayerId
from pursuit.models.locations import CITY_UNKNOWN, HIDE
from pursuit.views.adversary import AdversaryView
from pursuit.views.pursuer import PursuerView
from tests.utils.plays import plays, prefix, rnd

G = PlayerId.LORD_GODALMING
S = PlayerId.DR_SEWARD


def _abbrevs(places):
    return {p.abbrev for p in places}


def test_first_round_anywhere(graph):
    view = AdversaryView.from_plays("")
    hunters = view.where_can_i_go()
    assert len(hunters) == 71
    drac = view.where_can_they_go(ADVERSARY)
    assert len(drac) == 70
    assert graph.hospital not in drac
    # any start on the board gives the same first-round answer
    assert reachable(view, G, graph.place("LO")) == set(graph.places)
    assert reachable(view, ADVERSARY, graph.place("CD")) == drac


def test_first_round_still_checks_start_location():
    view = AdversaryView.from_plays("")
    with pytest.raises(QueryError):
        reachable(view, G, HIDE)
    with pytest.raises(QueryError):
        reachable(view, ADVERSARY, CITY_UNKNOWN)


def test_dracula_never_enters_hospital(graph):
    view = AdversaryView.from_plays(plays(rnd("SZ")))
    assert view.round == 1
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"SZ", "BE", "BD", "KL", "ZA"}


def test_dracula_cannot_hide_twice_in_window():
    view = AdversaryView.from_plays(plays(rnd("SZ"), rnd("HI")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"BE", "BD", "KL", "ZA"}


def test_dracula_double_back_allowed_once():
    view = AdversaryView.from_plays(plays(rnd("SZ"), rnd("BE")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"BE", "BC", "KL", "SJ", "SO", "SZ"}

    # after D2 back into Szeged, Belgrade is on the trail and needs a second double back
    view = AdversaryView.from_plays(plays(rnd("SZ"), rnd("BE"), rnd("D2")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"SZ", "BD", "KL", "ZA"}


def test_dracula_cannot_hide_at_sea():
    view = AdversaryView.from_plays(plays(rnd("BS")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"CN", "IO", "VR"}


def test_dracula_never_takes_the_train():
    view = AdversaryView.from_plays(plays(rnd("SZ")))
    with_rail = view.where_can_they_go(ADVERSARY, rail=True)
    without = view.where_can_they_go(ADVERSARY, rail=False)
    assert with_rail == without


def test_transport_filters(graph):
    view = AdversaryView.from_plays(plays(rnd("BS")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY, sea=False)) == set()
    view = AdversaryView.from_plays(plays(rnd("SZ")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY, road=False)) == {"SZ"}


@pytest.mark.parametrize(
    "round_,expected",
    [
        (4, {"MA"}),
        (1, {"MA", "AL", "LS", "SN", "SR"}),
        (2, {"MA", "AL", "LS", "SN", "SR", "BA", "BO"}),
        (3, {"MA", "AL", "LS", "SN", "SR", "BA", "BO", "PA"}),
    ],
)
def test_rail_hops_depend_on_round_and_player(graph, round_, expected):
    view = AdversaryView.from_plays(plays(rnd("KL", g="MA")))
    got = reachable(view, G, graph.place("MA"), road=False, sea=False, round=round_)
    assert _abbrevs(got) == expected


def test_rail_reach_matches_distance_table(graph):
    view = AdversaryView.from_plays(plays(rnd("KL")))
    for start in ("MA", "PA", "BE", "MU", "ED"):
        src = graph.place(start)
        for player in (G, S, PlayerId.VAN_HELSING, PlayerId.MINA_HARKER):
            for round_ in (1, 2, 3, 5):
                hops = (round_ + int(player)) % 4
                want = {p for p in graph.places if graph.rail_distance(src, p) <= hops}
                got = reachable(view, player, src, road=False, sea=False, round=round_)
                assert got == want


def test_hunter_moves_by_road_rail_and_sea(graph):
    # Seward in round 1 may take the train twice
    view = AdversaryView.from_plays(plays(rnd("KL", s="MA")))
    assert view.current_player == G
    got = _abbrevs(view.where_can_they_go(S))
    assert got == {"MA", "AL", "CA", "GR", "LS", "SN", "SR", "BA", "BO"}


def test_next_round_used_for_players_already_moved(graph):
    log = plays(rnd("KL", g="MA"), rnd("BE", g="MA"))
    view = AdversaryView.from_plays(prefix(log, 7))
    # Godalming has already moved in round 1; the next move is in round 2
    got = reachable(view, G, graph.place("MA"), road=False, sea=False, round=2)
    assert view.where_can_they_go(G, road=False, sea=False) == got
    # Van Helsing still moves in round 1: (1 + 2) % 4 = 3 hops
    assert view.where_can_they_go(PlayerId.VAN_HELSING, road=False, sea=False) == {
        p for p in graph.places if graph.rail_distance(graph.place("MA"), p) <= 3
    }


def test_pursuer_view_unknown_dracula_has_no_moves(graph):
    view = PursuerView.from_plays(plays(rnd("C?")))
    assert view.location(ADVERSARY) == CITY_UNKNOWN
    assert view.where_can_they_go(ADVERSARY) == set()

    view = PursuerView.from_plays(plays(rnd("SZ")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"SZ", "BE", "BD", "KL", "ZA"}


def test_query_misuse(graph):
    view = AdversaryView.from_plays(plays(rnd("KL")))
    with pytest.raises(QueryError):
        reachable(view, 7, graph.place("KL"))
    with pytest.raises(QueryError):
        reachable(view, G, HIDE)
    with pytest.raises(QueryError):
        view.where_can_they_go(-1)


def test_hide_blocks_until_it_leaves_the_window():
    moves = [rnd("SZ"), rnd("HI"), rnd("BE"), rnd("SO"), rnd("VA"), rnd("SA")]
    # the hide is five moves back: still inside the window
    view = AdversaryView.from_plays(plays(*moves))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"SO", "VA", "IO"}

    # one more move pushes it to the end of the trail
    view = AdversaryView.from_plays(plays(*moves, rnd("AT")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"AT", "VA", "IO"}


def test_double_back_blocks_until_it_leaves_the_window():
    moves = [rnd("SZ"), rnd("BE"), rnd("D2"), rnd("KL"), rnd("GA"), rnd("CN"), rnd("VR")]
    view = AdversaryView.from_plays(plays(*moves))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"VR", "SO", "BS"}

    view = AdversaryView.from_plays(plays(*moves, rnd("SO")))
    assert _abbrevs(view.where_can_they_go(ADVERSARY)) == {"SO", "BE", "BC", "SA", "SJ", "VA", "VR"}
