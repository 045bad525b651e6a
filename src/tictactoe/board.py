"""The Game board: the 9 cells and the rules that only depend on the cells (lines, full board)"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import GameStateError, InvalidBoardError
from src.tictactoe.marks import Mark
from src.tictactoe.notation import BOARD_SIZE, is_valid_board_notation

CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Order matters: rows, columns, then the two diagonals. The first completed line is reported.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def _empty_cells() -> list[Mark]:
    return [Mark.EMPTY] * CELL_COUNT


@dataclass
class Board:
    cells: list[Mark] = field(default_factory=_empty_cells)

    def __post_init__(self) -> None:
        if len(self.cells) != CELL_COUNT:
            raise GameStateError(
                f"A board has exactly {CELL_COUNT} cells, got {len(self.cells)}."
            )

    @classmethod
    def from_notation(cls, notation: str) -> Self:
        """Construct a board from its notation, ex. `XO1/1X1/2O` (see src/tictactoe/notation.py)"""
        if not is_valid_board_notation(notation):
            raise InvalidBoardError(f"Cannot interpret {notation!r} as a 3x3 board.")

        cells: list[Mark] = []
        for character in notation.replace("/", ""):
            if character.isdigit():
                cells.extend([Mark.EMPTY] * int(character))
            else:
                cells.append(Mark.from_symbol(character))
        return cls(cells)

    def to_notation(self) -> str:
        """Rows are separated by slashes."""
        return "/".join(
            self._row_to_notation(row_start)
            for row_start in range(0, CELL_COUNT, BOARD_SIZE)
        )

    def _row_to_notation(self, row_start: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for mark in self.cells[row_start : row_start + BOARD_SIZE]:
            if mark == Mark.EMPTY:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(mark.to_symbol())
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def mark(self, index: int) -> Mark:
        return self.cells[index]

    def place(self, index: int, mark: Mark) -> None:
        self.cells[index] = mark

    def clear(self) -> None:
        """Mutates in place, so anyone holding this board sees the cleared cells."""
        self.cells[:] = _empty_cells()

    @staticmethod
    def is_within_bounds(index: int) -> bool:
        return 0 <= index < CELL_COUNT

    def is_empty(self, index: int) -> bool:
        return self.cells[index] == Mark.EMPTY

    def empty_cells(self) -> list[int]:
        return [index for index, mark in enumerate(self.cells) if mark == Mark.EMPTY]

    def is_full(self) -> bool:
        return all(mark != Mark.EMPTY for mark in self.cells)

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def winning_line(self) -> Optional[tuple[int, int, int]]:
        """First line (in WINNING_LINES order) holding three equal, non-empty marks."""
        for line in WINNING_LINES:
            a, b, c = (self.cells[index] for index in line)
            if a != Mark.EMPTY and a == b == c:
                return line
        return None

    def winner(self) -> Optional[Mark]:
        line = self.winning_line()
        if line is None:
            return None
        return self.cells[line[0]]
