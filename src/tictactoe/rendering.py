"""
Maps a game state (and the result of the last move) to what a presentation layer should show.

Nothing in here draws anything. The presentation layer takes a BoardView and applies it to its own widgets:
set the status label, set each cell's symbol, enable/disable cells and the start button.
"""

from dataclasses import dataclass
from typing import Optional

from src.tictactoe.game import GameState, MoveResult, Outcome, Phase
from src.tictactoe.marks import Mark

START_PROMPT = "Press Start to begin"
TURN_FORMAT = "Player {player}'s turn"
WIN_FORMAT = "Player {player} wins!"
DRAW_MESSAGE = "Draw!"


@dataclass(frozen=True)
class CellView:
    index: int
    symbol: str
    enabled: bool


@dataclass(frozen=True)
class BoardView:
    cells: tuple[CellView, ...]
    status_text: str
    start_enabled: bool
    locked: bool
    last_outcome: Optional[Outcome] = None


def player_label(mark: Mark) -> str:
    return mark.to_symbol()


def status_text(state: GameState) -> str:
    """
    The message above the board.

    NOTE an ended game does not store how it ended. The board tells: a completed line means a win, a full board a draw.
    An ended game whose board got cleared (reset with hard=False) waits for Start again.
    """
    if state.phase == Phase.NOT_STARTED:
        return START_PROMPT
    if state.phase == Phase.IN_PROGRESS:
        return TURN_FORMAT.format(player=player_label(state.current_player))

    winner = state.board.winner()
    if winner is not None:
        return WIN_FORMAT.format(player=player_label(winner))
    if state.board.is_full():
        return DRAW_MESSAGE
    return START_PROMPT


def render(state: GameState, last_result: Optional[MoveResult] = None) -> BoardView:
    in_progress = state.phase == Phase.IN_PROGRESS
    cells = tuple(
        CellView(
            index=index,
            symbol=mark.to_symbol(),
            # only empty cells are clickable, and only while the game runs
            enabled=in_progress and mark == Mark.EMPTY,
        )
        for index, mark in enumerate(state.board.cells)
    )
    return BoardView(
        cells=cells,
        status_text=status_text(state),
        start_enabled=not in_progress,
        locked=not in_progress,
        last_outcome=last_result.outcome if last_result else None,
    )
