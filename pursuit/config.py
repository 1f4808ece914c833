from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

# The score drops by one per adversary turn in the real game, so 366 adversary
# turns bound a log; a few extra plays are tolerated.
MAX_PLAYS = int(os.getenv("PURSUIT_MAX_PLAYS", str(366 * 5 + 5 + 10)))
MAX_MESSAGE_LENGTH = int(os.getenv("PURSUIT_MAX_MESSAGE_LENGTH", "110"))
LOG_LEVEL = os.getenv("PURSUIT_LOG_LEVEL", "INFO").upper()


class GameRules(BaseModel):
    """Fixed numbers of the game. Health values are in points, penalties in score."""

    model_config = ConfigDict(frozen=True)

    num_players: int = 5
    trail_size: int = 6

    hunter_start_health: int = 9
    dracula_start_health: int = 40
    start_score: int = 366

    trap_encounter_loss: int = 2
    dracula_encounter_loss: int = 4  # paid by the hunter
    hunter_encounter_loss: int = 10  # paid by Dracula
    rest_gain: int = 3
    sea_loss: int = 2
    castle_gain: int = 10

    hospital_score_loss: int = 6
    vampire_matures_score_loss: int = 13

    rail_restrict: int = 4
    max_encounters: int = 4

    max_plays: int = MAX_PLAYS
    max_message_length: int = MAX_MESSAGE_LENGTH

    @property
    def window(self) -> int:
        """Moves scanned for an earlier hide or double back."""
        return self.trail_size - 1


DEFAULT_RULES = GameRules()
