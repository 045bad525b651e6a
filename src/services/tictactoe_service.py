"""Orchestration of communication from the presentation layer to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    BoardViewResponse,
    CellResponse,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ResetRequest,
    StartGameRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Outcome, Phase, Player
from src.db.repository import GameRepository
from src.tictactoe.game import GameEngine, GameState, MoveResult
from src.tictactoe.game import Outcome as DomainOutcome
from src.tictactoe.game import Phase as DomainPhase
from src.tictactoe.rendering import BoardView, render

logger = logging.getLogger(__name__)


class TicTacToeService:
    """Orchestration of layers for a tic-tac-toe game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- presentation layer entry points ---
    def create_new_game(self) -> GameResponse:
        """Fresh game: empty board, waiting for someone to press Start."""
        new_model = GameState.initial().to_model()
        stored_game, game_id = self.repo.create_game(new_model)
        logger.info("game created", extra={"game_id": str(game_id)})
        return self._create_game_response(game_id, stored_game)

    def start_game(self, request: StartGameRequest) -> GameResponse:
        """Start button. Does nothing to a game that is already running."""
        engine = self._load_engine(request.game_id)

        if not engine.start():
            # nothing changed, so nothing to store
            return self.get_game_state(GetGameRequest(game_id=request.game_id))

        logger.info("game started", extra={"game_id": str(request.game_id)})
        return self._store_and_respond(request.game_id, engine.state)

    def make_move(self, request: MoveRequest) -> GameResponse:
        """A cell got clicked."""
        engine = self._load_engine(request.game_id)

        result = engine.move(request.cell_index)

        if result.outcome == DomainOutcome.REJECTED:
            logger.debug(
                "move rejected",
                extra={"game_id": str(request.game_id), "cell": request.cell_index},
            )
        elif result.phase == DomainPhase.ENDED:
            logger.info(
                "game ended",
                extra={
                    "game_id": str(request.game_id),
                    "outcome": result.outcome.name.lower(),
                    "winner": result.winner.to_symbol() if result.winner else None,
                },
            )

        return self._store_and_respond(request.game_id, engine.state, result)

    def reset_game(self, request: ResetRequest) -> GameResponse:
        """Restart button (hard=True), or only clear the board (hard=False)."""
        engine = self._load_engine(request.game_id)
        engine.reset(hard=request.hard)
        logger.info(
            "game reset", extra={"game_id": str(request.game_id), "hard": request.hard}
        )
        return self._store_and_respond(request.game_id, engine.state)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state (ex. to redraw the screen)."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        deleted = self.repo.delete_game(request.game_id)
        if deleted is None:
            game_id = request.game_id
            raise RepositoryError(f"Game with {game_id=} not found.")
        logger.info("game deleted", extra={"game_id": str(request.game_id)})

    # -- Internal helpers --
    def _load_engine(self, game_id: UUID) -> GameEngine:
        """Rebuild an engine around the stored state."""
        stored_model = self._fetch_game(game_id)
        return GameEngine(GameState.from_model(stored_model))

    def _store_and_respond(
        self, game_id: UUID, state: GameState, result: Optional[MoveResult] = None
    ) -> GameResponse:
        """Capture updated state in GameModel, store it, and answer with it."""
        updated_model = state.to_model(result)
        self.repo.update_game(game_id, updated_model)
        return self._create_game_response(game_id, updated_model, result)

    def _create_game_response(
        self,
        game_id: UUID,
        model: GameModel,
        result: Optional[MoveResult] = None,
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        state = GameState.from_model(model)
        view = render(state, result)
        winner = state.board.winner() if state.phase == DomainPhase.ENDED else None

        return GameResponse(
            game_id=game_id,
            board=state.board.to_notation(),
            phase=Phase[state.phase.name],
            # only meaningful while the game runs
            current_player=(
                Player[state.current_player.name]
                if state.phase == DomainPhase.IN_PROGRESS
                else None
            ),
            last_outcome=Outcome(model.last_outcome) if model.last_outcome else None,
            winner=Player[winner.name] if winner else None,
            view=self._create_view_response(view),
        )

    def _create_view_response(self, view: BoardView) -> BoardViewResponse:
        return BoardViewResponse(
            cells=[
                CellResponse(index=cell.index, symbol=cell.symbol, enabled=cell.enabled)
                for cell in view.cells
            ],
            status_text=view.status_text,
            start_enabled=view.start_enabled,
            locked=view.locked,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
