"""Unit tests for /src/tictactoe/board.py"""

import pytest

from src.core.exceptions import GameStateError, InvalidBoardError
from src.tictactoe.board import CELL_COUNT, WINNING_LINES, Board
from src.tictactoe.marks import Mark

X, O, _ = Mark.X, Mark.O, Mark.EMPTY


def test_new_board_is_empty() -> None:
    board = Board()
    assert board.cells == [Mark.EMPTY] * 9
    assert board.empty_cells() == list(range(9))
    assert not board.is_full()
    assert board.winner() is None


@pytest.mark.parametrize("cell_count", [0, 8, 10])
def test_board_always_has_nine_cells(cell_count: int) -> None:
    with pytest.raises(GameStateError):
        _ = Board([Mark.EMPTY] * cell_count)


def test_from_notation() -> None:
    board = Board.from_notation("XO1/1X1/2O")
    assert board.cells == [X, O, _, _, X, _, _, _, O]


@pytest.mark.parametrize("notation", ["3/3/3", "XO1/1X1/2O", "XOX/OXO/OXO", "2X/O2/1X1"])
def test_notation_roundtrip(notation: str) -> None:
    assert Board.from_notation(notation).to_notation() == notation


def test_invalid_notation_raises() -> None:
    with pytest.raises(InvalidBoardError):
        _ = Board.from_notation("XXXX/3/3")


def test_place_and_clear() -> None:
    board = Board()
    board.place(4, X)
    assert board.mark(4) == X
    assert not board.is_empty(4)
    assert board.count(X) == 1

    cells = board.cells
    board.clear()
    assert board.cells == [Mark.EMPTY] * CELL_COUNT
    # cleared in place
    assert cells is board.cells


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_index_out_of_bounds(index: int) -> None:
    assert not Board.is_within_bounds(index)


def test_all_indices_within_bounds() -> None:
    assert all(Board.is_within_bounds(index) for index in range(CELL_COUNT))


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line: tuple[int, int, int], mark: Mark) -> None:
    board = Board()
    for index in line:
        board.place(index, mark)
    assert board.winner() == mark
    assert board.winning_line() == line


def test_eight_winning_lines() -> None:
    assert len(WINNING_LINES) == 8
    assert WINNING_LINES[0] == (0, 1, 2)
    assert WINNING_LINES[-1] == (2, 4, 6)


def test_mixed_line_does_not_win() -> None:
    board = Board([X, X, O, _, _, _, _, _, _])
    assert board.winner() is None


def test_first_line_in_order_is_reported() -> None:
    """Cannot happen in a real game, but the scan order is fixed: the top row comes before the left column."""
    board = Board.from_notation("XXX/X2/X2")
    assert board.winning_line() == (0, 1, 2)


def test_full_board() -> None:
    board = Board.from_notation("XOX/XOO/OXX")
    assert board.is_full()
    assert board.winner() is None
    assert board.empty_cells() == []
