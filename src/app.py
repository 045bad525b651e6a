"""
Wiring for a presentation layer: one call to get a ready-to-use service.

    with open_service() as service:
        game = service.create_new_game()
        game = service.start_game(StartGameRequest(game_id=game.game_id))
"""

from contextlib import contextmanager
from typing import Iterator

from src.core.logging import setup_logging
from src.db.database import SessionLocal, settings
from src.db.sql_repository import SQLGameRepository
from src.services.tictactoe_service import TicTacToeService


@contextmanager
def open_service() -> Iterator[TicTacToeService]:
    setup_logging(settings)
    db = SessionLocal()
    try:
        yield TicTacToeService(SQLGameRepository(db))
    finally:
        db.close()
