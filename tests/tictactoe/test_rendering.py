"""Unit tests for /src/tictactoe/rendering.py"""

import pytest

from src.tictactoe.board import Board
from src.tictactoe.game import GameEngine, GameState, Outcome, Phase
from src.tictactoe.marks import Mark
from src.tictactoe.rendering import (
    DRAW_MESSAGE,
    START_PROMPT,
    BoardView,
    render,
    status_text,
)


def test_before_start() -> None:
    view = render(GameState.initial())
    assert isinstance(view, BoardView)
    assert view.status_text == START_PROMPT == "Press Start to begin"
    assert view.start_enabled
    assert view.locked
    assert len(view.cells) == 9
    assert not any(cell.enabled for cell in view.cells)
    assert all(cell.symbol == "" for cell in view.cells)
    assert view.last_outcome is None


@pytest.mark.parametrize("player, text", [(Mark.X, "Player X's turn"), (Mark.O, "Player O's turn")])
def test_turn_message(player: Mark, text: str) -> None:
    state = GameState(Board.from_notation("X2/3/3"), player, Phase.IN_PROGRESS)
    assert status_text(state) == text


def test_only_empty_cells_are_enabled() -> None:
    engine = GameEngine()
    engine.start()
    result = engine.move(4)

    view = render(engine.state, result)
    assert [cell.index for cell in view.cells] == list(range(9))
    assert view.cells[4].symbol == "X"
    assert not view.cells[4].enabled
    assert all(cell.enabled for cell in view.cells if cell.index != 4)
    assert not view.start_enabled
    assert not view.locked
    assert view.last_outcome == Outcome.CONTINUE


@pytest.mark.parametrize(
    "notation, text",
    [
        ("XXX/OO1/3", "Player X wins!"),
        ("XX1/OOO/X2", "Player O wins!"),
        ("XOX/XOO/OXX", DRAW_MESSAGE),
    ],
)
def test_ended_messages(notation: str, text: str) -> None:
    state = GameState(Board.from_notation(notation), Mark.X, Phase.ENDED)
    view = render(state)
    assert view.status_text == text
    assert view.locked
    assert view.start_enabled
    assert not any(cell.enabled for cell in view.cells)


def test_win_locks_the_board() -> None:
    engine = GameEngine()
    engine.start()
    for cell in [0, 3, 1, 4]:
        engine.move(cell)
    result = engine.move(2)

    view = render(engine.state, result)
    assert view.status_text == "Player X wins!"
    assert view.last_outcome == Outcome.WIN
    # cells 5-8 are still empty, but the game is over
    assert not any(cell.enabled for cell in view.cells)
    assert [cell.symbol for cell in view.cells[:3]] == ["X", "X", "X"]


def test_cleared_board_after_game_ended() -> None:
    """Clearing an ended game (reset with hard=False) is not a draw: the board waits for Start"""
    engine = GameEngine()
    engine.start()
    for cell in [0, 3, 1, 4, 2]:
        engine.move(cell)
    engine.reset(hard=False)

    view = render(engine.state)
    assert engine.phase == Phase.ENDED
    assert view.status_text == START_PROMPT
    assert view.start_enabled
    assert not any(cell.enabled for cell in view.cells)
