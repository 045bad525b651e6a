"""Runtime settings, sourced from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///:memory:"


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable configuration of the service / session store shell. The game engine itself reads none of this."""

    database_url: str
    db_echo: bool
    log_level: str
    log_format: str


def resolve_log_level_name(default: str = "INFO") -> str:
    """Project-prefixed override first, then the generic LOG_LEVEL."""
    value = os.getenv("TICTACTOE_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_settings() -> Settings:
    return Settings(
        database_url=_str("TICTACTOE_DATABASE_URL", DEFAULT_DATABASE_URL),
        db_echo=_flag("TICTACTOE_DB_ECHO"),
        log_level=resolve_log_level_name(),
        log_format=_str("TICTACTOE_LOG_FORMAT", "text").lower(),
    )
