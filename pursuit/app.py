from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from .core.primitives import DecodeError, QueryError
from .engine.core import ReplayEngine
from .engine.systems import movement
from .engine.systems.turn import next_round_for
from .logging_listeners import register_listeners
from .models.api import (
    MapInfo,
    PlaceInfo,
    PlayerSummary,
    ReachableRequest,
    ReachableResponse,
    ReplayRequest,
    ViewSummary,
)
from .models.enums import Perspective, PlayerId, Transport
from .views.adversary import AdversaryView
from .views.base import GameView
from .views.pursuer import PursuerView

app = FastAPI(title="Pursuit - replay views")
engine = ReplayEngine()
register_listeners()

VIEW_TYPES: dict[Perspective, type[GameView]] = {
    Perspective.ADVERSARY: AdversaryView,
    Perspective.PURSUER: PursuerView,
}


def _view(perspective: Perspective, req: ReplayRequest) -> GameView:
    try:
        state = engine.decode(req.plays, req.messages, perspective=perspective)
    except DecodeError as e:
        raise HTTPException(400, str(e))
    return VIEW_TYPES[perspective](state, engine.graph)


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "places": len(engine.graph)}


@app.get("/map", response_model=MapInfo)
def board():
    g = engine.graph
    return MapInfo(
        places=[PlaceInfo(id=p.id, abbrev=p.abbrev, name=p.name, terrain=p.terrain) for p in g.places],
        edges={t: g.edge_count(t) for t in Transport},
        hospital=g.hospital.abbrev,
        castle=g.castle.abbrev,
    )


@app.post("/views/{perspective}", response_model=ViewSummary)
def summarize(perspective: Perspective, req: ReplayRequest):
    view = _view(perspective, req)
    players = [
        PlayerSummary(
            player=p,
            name=p.name,
            health=view.health(p),
            location=str(view.location(p)),
            trail=[str(loc) for loc in view.trail(p).entries],
        )
        for p in PlayerId
    ]
    out = ViewSummary(
        perspective=perspective,
        round=view.round,
        current_player=view.current_player,
        score=view.score,
        players=players,
    )
    if perspective == Perspective.ADVERSARY:
        minions = view.state.minions
        out.traps = minions.trap_counts()
        out.vampire = minions.vampire.abbrev if minions.vampire else None
    return out


@app.post("/views/{perspective}/reachable", response_model=ReachableResponse)
def reachable(perspective: Perspective, req: ReachableRequest):
    view = _view(perspective, req)
    rnd = next_round_for(view.round, view.current_player, req.player)
    try:
        if req.from_location is None:
            locs = view.where_can_they_go(req.player, road=req.road, rail=req.rail, sea=req.sea)
        else:
            start = engine.graph.find(req.from_location)
            if start is None:
                raise HTTPException(400, f"unknown location {req.from_location}")
            locs = movement.reachable(
                view, req.player, start, road=req.road, rail=req.rail, sea=req.sea, round=rnd
            )
    except QueryError as e:
        raise HTTPException(400, str(e))
    return ReachableResponse(
        player=req.player, round=rnd, locations=sorted(p.abbrev for p in locs)
    )
