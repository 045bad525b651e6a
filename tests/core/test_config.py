"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import DEFAULT_DATABASE_URL, load_settings, resolve_log_level_name

ENV_VARS = (
    "TICTACTOE_DATABASE_URL",
    "TICTACTOE_DB_ECHO",
    "TICTACTOE_LOG_LEVEL",
    "TICTACTOE_LOG_FORMAT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.database_url == DEFAULT_DATABASE_URL == "sqlite:///:memory:"
    assert not settings.db_echo
    assert settings.log_level == "INFO"
    assert settings.log_format == "text"


def test_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICTACTOE_DATABASE_URL", "sqlite:///games.db")
    monkeypatch.setenv("TICTACTOE_DB_ECHO", "yes")
    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
    monkeypatch.setenv("TICTACTOE_LOG_FORMAT", "JSON")

    settings = load_settings()
    assert settings.database_url == "sqlite:///games.db"
    assert settings.db_echo
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", "whatever"])
def test_echo_flag_is_off_unless_truthy(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TICTACTOE_DB_ECHO", raw)
    assert not load_settings().db_echo


def test_blank_database_url_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICTACTOE_DATABASE_URL", "   ")
    assert load_settings().database_url == DEFAULT_DATABASE_URL


def test_log_level_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert resolve_log_level_name() == "WARNING"

    monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "error")
    assert resolve_log_level_name() == "ERROR"
