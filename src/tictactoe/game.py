"""
The GameEngine is the entrypoint into the domain layer, for the service layer and for any presentation layer.
It is responsible for the rules of a round of tic-tac-toe: whose turn it is, which moves are accepted, and when the game ends.

The state it works on (GameState) is a plain value. It can be built from / encoded into a GameModel,
so the service layer can rebuild an engine for every request without the engine knowing about persistence.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.tictactoe.board import Board
from src.tictactoe.marks import FIRST_PLAYER, Mark

logger = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    ENDED = auto()


class Outcome(Enum):
    CONTINUE = auto()
    WIN = auto()
    DRAW = auto()
    REJECTED = auto()


@dataclass(frozen=True)
class MoveResult:
    """What happened after a move attempt. Enough for a presentation layer to pick a message and lock the board."""

    outcome: Outcome
    phase: Phase
    cell: Optional[int]
    winner: Optional[Mark] = None

    @property
    def accepted(self) -> bool:
        return self.outcome != Outcome.REJECTED


@dataclass
class GameState:
    board: Board = field(default_factory=Board)
    current_player: Mark = FIRST_PLAYER
    phase: Phase = Phase.NOT_STARTED

    def __post_init__(self) -> None:
        if self.current_player == Mark.EMPTY:
            raise GameStateError("The current player must be X or O.")

    @classmethod
    def initial(cls) -> Self:
        """Empty board, nobody started yet, X to move first."""
        return cls()

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameState from the information the Service layer actually has"""

        # Validation
        phase_name = model.phase.replace(" ", "_").upper()
        if phase_name not in Phase.__members__:
            raise GameStateError(
                f"Invalid phase: {model.phase!r}. \nPick one from {','.join([phase.name.lower() for phase in Phase])}"
            )

        board = Board.from_notation(model.board)
        current_player = Mark.from_symbol(model.current_player)
        return cls(board, current_player, Phase[phase_name])

    def to_model(self, last_result: Optional[MoveResult] = None) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_notation(),
            current_player=self.current_player.to_symbol().lower(),
            phase=self.phase.name.lower().replace("_", " "),
            last_outcome=last_result.outcome.name.lower() if last_result else None,
        )


class GameEngine:
    """
    Enforces the rules and phase transitions of a single game.
    ----

    NOT_STARTED --start--> IN_PROGRESS --move completes a line / fills the board--> ENDED
    ENDED --start or reset(hard=True)--> IN_PROGRESS

    Invalid input (occupied cell, out-of-range index, game not running, starting a running game) never raises.
    It is simply ignored, and move() reports it as REJECTED.
    """

    def __init__(self, state: Optional[GameState] = None) -> None:
        self.state = state if state is not None else GameState.initial()

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def current_player(self) -> Mark:
        return self.state.current_player

    # --- CONTROL FLOW (start / restart buttons) ---
    def start(self) -> bool:
        """
        Start a game, unless one is already running. Returns whether anything changed.

        NOTE the phase is set BEFORE clearing the board. Restarting (reset with hard=True) does it the other way around.
        """
        if self.phase == Phase.IN_PROGRESS:
            logger.debug("start ignored, game already in progress")
            return False

        self._change_phase(Phase.IN_PROGRESS)
        self.reset(hard=False)
        return True

    def reset(self, hard: bool) -> None:
        """
        Clear the board and give the first turn back to X.

        hard=True: also (re)opens the game, whatever phase it was in (the restart button).
        hard=False: the phase is left alone (start() uses this after opening the game itself).
        """
        self.board.clear()
        self.state.current_player = FIRST_PLAYER
        if hard:
            self._change_phase(Phase.IN_PROGRESS)

    # --- PLAYING ---
    def move(self, cell_index: int) -> MoveResult:
        """
        Attempt to place the current player's mark
        -----

        1. reject silently if the game is not running, the index is off the board, or the cell is taken
        2. place the mark
        3. check for a win (ALWAYS before the draw: a winning move may also fill the board)
        4. check for a draw
        5. otherwise hand the turn to the opponent
        """
        if not self._is_acceptable(cell_index):
            logger.debug("move rejected", extra={"cell": cell_index, "phase": self.phase.name})
            return MoveResult(
                Outcome.REJECTED,
                self.phase,
                cell_index if self._is_index(cell_index) else None,
            )

        player = self.current_player
        self.board.place(cell_index, player)

        winner = self.winner()
        if winner is not None:
            self._change_phase(Phase.ENDED)
            return MoveResult(Outcome.WIN, self.phase, cell_index, winner)

        if self.is_draw():
            self._change_phase(Phase.ENDED)
            return MoveResult(Outcome.DRAW, self.phase, cell_index)

        self.state.current_player = player.opponent
        return MoveResult(Outcome.CONTINUE, self.phase, cell_index)

    def winner(self) -> Optional[Mark]:
        return self.board.winner()

    def is_draw(self) -> bool:
        """Every cell is taken. Only meaningful after winner() came back empty."""
        return self.board.is_full()

    def interactable_cells(self) -> list[int]:
        """Cells a player may still click on"""
        if self.phase != Phase.IN_PROGRESS:
            return []
        return self.board.empty_cells()

    # -- PRIVATE HELPERS ---
    @staticmethod
    def _is_index(value: object) -> bool:
        # bool is a subclass of int, but True is not a cell
        return isinstance(value, int) and not isinstance(value, bool)

    def _is_acceptable(self, cell_index: int) -> bool:
        if self.phase != Phase.IN_PROGRESS:
            return False
        if not self._is_index(cell_index):
            return False
        if not self.board.is_within_bounds(cell_index):
            return False
        return self.board.is_empty(cell_index)

    def _change_phase(self, new_phase: Phase) -> None:
        if new_phase != self.state.phase:
            logger.debug("phase %s -> %s", self.state.phase.name, new_phase.name)
        self.state.phase = new_phase
