"""Protocol repository (SQLAlchemy implementation in src/db/sql_repository.py, tests use a dictionary)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Get game by ID. None if no record exists (the service turns that into a RepositoryError)."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a fresh (not started) game and return the stored data + newly generated game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the stored state of an existing record. None if there is no such record."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record and return what it held. None if there was nothing to remove."""
        ...
