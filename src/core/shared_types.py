"""
Type definitions used across layers
"""

from enum import StrEnum


class Phase(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    ENDED = "ended"


class Player(StrEnum):
    X = "x"
    O = "o"


class Outcome(StrEnum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    REJECTED = "rejected"


# --- NOTE the domain layer has its own (non-string) versions of these enums in src/tictactoe.
# --- These are the ones that travel across layer boundaries (API models, GameModel, database).
