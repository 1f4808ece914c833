"""Past-plays string -> typed turn records.

A log is a run of 7-character tokens separated by single spaces::

    GMN.... SPL.... HAM.... MPA.... DC?T.V.

character 0 names the player, 1-2 the location and 3-6 are flags. Trailing
flags may be left off; they read as ``.``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ..config import DEFAULT_RULES, GameRules
from ..core.primitives import DecodeError
from ..models.enums import PLAYER_MARKERS, AdversaryAction, Encounter, Perspective, PlayerId
from ..models.locations import (
    CITY_UNKNOWN,
    HIDE,
    MAX_DOUBLE_BACK,
    MIN_DOUBLE_BACK,
    SEA_UNKNOWN,
    TELEPORT,
    Location,
    double_back,
)
from ..models.turns import AdversaryTurn, PursuerTurn, TurnRecord

if TYPE_CHECKING:
    from ..models.map import LocationGraph

PLAY_SEP = " "
CHARS_PER_PLAY = 7
MIN_CHARS_PER_PLAY = 3
FLAGS_START = 3
BLANK = "."
# str.isdigit() also admits other scripts' digits and superscripts
ASCII_DIGITS = "0123456789"

_PLAYERS_BY_MARKER = {m: p for p, m in PLAYER_MARKERS.items()}

# allowed characters at each adversary flag position
_ADVERSARY_FLAGS = ("T" + BLANK, "V" + BLANK, "MV" + BLANK, BLANK)
_PURSUER_FLAGS = "TVD" + BLANK


def split_plays(plays: str) -> list[str]:
    body = plays.strip()
    return body.split(PLAY_SEP) if body else []


def _adversary_move(
    index: int, token: str, code: str, graph: LocationGraph, perspective: Perspective
) -> Location:
    place = graph.find(code)
    if place is not None:
        return place
    if code == "HI":
        return HIDE
    if code == "TP":
        return TELEPORT
    if code[0] == "D" and code[1] in ASCII_DIGITS:
        n = int(code[1])
        if not MIN_DOUBLE_BACK <= n <= MAX_DOUBLE_BACK:
            raise DecodeError(f"double back {n} out of range", turn=index, token=token)
        return double_back(n)
    if code in ("C?", "S?"):
        if perspective != Perspective.PURSUER:
            raise DecodeError(
                "obscured location in a full-knowledge log", turn=index, token=token
            )
        return CITY_UNKNOWN if code == "C?" else SEA_UNKNOWN
    raise DecodeError(f"unknown location {code!r}", turn=index, token=token)


def parse_token(
    index: int,
    token: str,
    *,
    graph: LocationGraph,
    perspective: Perspective,
    rules: GameRules = DEFAULT_RULES,
) -> TurnRecord:
    if not MIN_CHARS_PER_PLAY <= len(token) <= CHARS_PER_PLAY:
        raise DecodeError("malformed play", turn=index, token=token)
    player = _PLAYERS_BY_MARKER.get(token[0])
    if player is None:
        raise DecodeError(f"unknown player marker {token[0]!r}", turn=index, token=token)
    expected = PlayerId(index % rules.num_players)
    if player != expected:
        raise DecodeError(
            f"play by {player.name} where {expected.name} was due", turn=index, token=token
        )

    code = token[1:FLAGS_START]
    flags = token[FLAGS_START:].ljust(CHARS_PER_PLAY - FLAGS_START, BLANK)

    if player.is_adversary:
        for pos, (ch, allowed) in enumerate(zip(flags, _ADVERSARY_FLAGS)):
            if ch not in allowed:
                raise DecodeError(
                    f"bad flag {ch!r} at position {FLAGS_START + pos}", turn=index, token=token
                )
        return AdversaryTurn(
            index=index,
            token=token,
            move=_adversary_move(index, token, code, graph, perspective),
            trap_placed=flags[0] == "T",
            vampire_placed=flags[1] == "V",
            action=AdversaryAction(flags[2]) if flags[2] != BLANK else None,
        )

    place = graph.find(code)
    if place is None:
        raise DecodeError(f"unknown location {code!r}", turn=index, token=token)
    for pos, ch in enumerate(flags):
        if ch not in _PURSUER_FLAGS:
            raise DecodeError(
                f"bad flag {ch!r} at position {FLAGS_START + pos}", turn=index, token=token
            )
    encounters = tuple(Encounter(ch) for ch in flags[: rules.max_encounters] if ch != BLANK)
    return PursuerTurn(
        index=index, token=token, player=player, move=place, encounters=encounters
    )


def parse_plays(
    plays: str,
    *,
    graph: LocationGraph,
    perspective: Perspective,
    rules: GameRules = DEFAULT_RULES,
) -> tuple[TurnRecord, ...]:
    tokens = split_plays(plays)
    if len(tokens) > rules.max_plays:
        raise DecodeError(f"log has {len(tokens)} plays, limit is {rules.max_plays}")
    return tuple(
        parse_token(i, tok, graph=graph, perspective=perspective, rules=rules)
        for i, tok in enumerate(tokens)
    )
