"""Requests and Response models"""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import GameStateError, InvalidRequestError
from src.core.shared_types import Outcome, Phase, Player
from src.tictactoe.board import CELL_COUNT
from src.tictactoe.notation import is_valid_board_notation

BoardNotation = str


# --- REQUEST MODELS ---
class StartGameRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    cell_index: int

    @field_validator("cell_index", mode="before")
    @classmethod
    def validate_cell_index(cls, value: Any) -> int:
        """
        Must be a whole number. Whether it is ON the board is a game rule, not a request problem:
        an index like 9 or -1 passes here and is ignored by the game.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRequestError(
                f"Cannot interpret cell_index: {value!r} as a cell number."
            )
        return value


class ResetRequest(BaseModel):
    game_id: UUID
    hard: bool = True


class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class CellResponse(BaseModel):
    index: int
    symbol: str
    enabled: bool


class BoardViewResponse(BaseModel):
    cells: list[CellResponse]
    status_text: str
    start_enabled: bool
    locked: bool

    @field_validator("cells")
    @classmethod
    def validate_cell_count(cls, value: list[CellResponse]) -> list[CellResponse]:
        if len(value) != CELL_COUNT:
            raise GameStateError(f"A board view has {CELL_COUNT} cells, got {len(value)}.")
        return value


class GameResponse(BaseModel):
    game_id: UUID
    board: BoardNotation
    phase: Phase
    current_player: Optional[Player]
    last_outcome: Optional[Outcome]
    winner: Optional[Player]
    view: BoardViewResponse

    @field_validator("board")
    @classmethod
    def validate_board(cls, value: str) -> str:
        if not is_valid_board_notation(value):
            raise GameStateError(f"Cannot interpret board: {value!r} as a 3x3 board.")
        return value
