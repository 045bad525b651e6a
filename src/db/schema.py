"""Database tables / schema"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.tictactoe.notation import EMPTY_BOARD_NOTATION


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    board: Mapped[str] = mapped_column(String(11), default=EMPTY_BOARD_NOTATION)
    current_player: Mapped[str] = mapped_column(String(1))
    phase: Mapped[str]
    last_outcome: Mapped[Optional[str]]
    # pass the function itself, so every row gets its own timestamp
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)
