"""Defines what can occupy a cell"""

from enum import Enum, auto
from typing import Self

from src.core.exceptions import GameStateError


class Mark(Enum):
    EMPTY = auto()
    X = auto()
    O = auto()

    @classmethod
    def from_symbol(cls, character: str) -> Self:
        """'X' / 'O' (either case) denote the players' marks"""
        try:
            return SYMBOL_TO_MARK[character.upper()]
        except KeyError:
            raise GameStateError(f"Unknown mark symbol: {character!r}") from None

    def to_symbol(self) -> str:
        """Empty cells have no symbol"""
        return MARK_TO_SYMBOL.get(self, "")

    @property
    def opponent(self) -> "Mark":
        if self == Mark.EMPTY:
            raise GameStateError("An empty cell has no opponent.")
        return Mark.O if self == Mark.X else Mark.X


SYMBOL_TO_MARK: dict[str, Mark] = {
    "X": Mark.X,
    "O": Mark.O,
}

MARK_TO_SYMBOL: dict[Mark, str] = {value: key for key, value in SYMBOL_TO_MARK.items()}

# X always opens the game
FIRST_PLAYER = Mark.X