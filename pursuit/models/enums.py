from enum import Enum, IntEnum


class PlayerId(IntEnum):
    """Turn order; the value is the player's index within a round."""

    LORD_GODALMING = 0
    DR_SEWARD = 1
    VAN_HELSING = 2
    MINA_HARKER = 3
    DRACULA = 4

    @property
    def marker(self) -> str:
        return PLAYER_MARKERS[self]

    @property
    def is_adversary(self) -> bool:
        return self is PlayerId.DRACULA


PLAYER_MARKERS: dict[PlayerId, str] = {
    PlayerId.LORD_GODALMING: "G",
    PlayerId.DR_SEWARD: "S",
    PlayerId.VAN_HELSING: "H",
    PlayerId.MINA_HARKER: "M",
    PlayerId.DRACULA: "D",
}

ADVERSARY = PlayerId.DRACULA
PURSUERS: tuple[PlayerId, ...] = tuple(p for p in PlayerId if not p.is_adversary)


class Terrain(str, Enum):
    CITY = "city"
    SEA = "sea"
    CASTLE = "castle"


class Transport(str, Enum):
    ROAD = "road"
    RAIL = "rail"
    SEA = "sea"


class MarkerKind(str, Enum):
    """Location values that do not name a concrete place."""

    UNKNOWN = "unknown"
    NOWHERE = "nowhere"
    CITY_UNKNOWN = "city_unknown"
    SEA_UNKNOWN = "sea_unknown"
    HIDE = "hide"
    DOUBLE_BACK = "double_back"
    TELEPORT = "teleport"


class Perspective(str, Enum):
    ADVERSARY = "adversary"  # full knowledge
    PURSUER = "pursuer"  # only what the hunters can observe


class Encounter(str, Enum):
    """What a pursuer ran into on arrival, in token order."""

    TRAP = "T"
    VAMPIRE = "V"
    DRACULA = "D"


class AdversaryAction(str, Enum):
    """Something leaving the end of the adversary's trail."""

    TRAP_MALFUNCTION = "M"
    VAMPIRE_MATURED = "V"


class ReplayEventKind(str, Enum):
    TURN_APPLIED = "turn_applied"
    INVARIANT_CLAMPED = "invariant_clamped"
    DECODE_FAILED = "decode_failed"
