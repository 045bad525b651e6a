"""Generate database session"""

from typing import Generator

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings, load_settings
from src.db.schema import Base


def build_engine(settings: Settings) -> Engine:
    """
    An in-memory SQLite database only lives as long as its connection.
    StaticPool keeps that single connection around, so every session sees the same games.
    """
    if settings.database_url.startswith("sqlite") and ":memory:" in settings.database_url:
        return create_engine(
            settings.database_url,
            echo=settings.db_echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(settings.database_url, echo=settings.db_echo)


settings = load_settings()
engine = build_engine(settings)
SessionLocal = sessionmaker(autoflush=False, bind=engine)

# Ensure all tables are created
Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
