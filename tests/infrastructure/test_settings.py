"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import LedgerSettings


def _no_dotenv(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    return logger


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Unset variables fall back to the defaults."""
    _no_dotenv(monkeypatch)
    monkeypatch.delenv("LEDGER_FETCH_LIMIT", raising=False)
    monkeypatch.delenv("LEDGER_CURRENCY_SYMBOL", raising=False)

    settings = LedgerSettings.from_env()

    assert settings.fetch_limit == 100
    assert settings.currency_symbol == "₹"


def test_from_env_reads_values(monkeypatch) -> None:
    _no_dotenv(monkeypatch)
    monkeypatch.setenv("LEDGER_FETCH_LIMIT", " 0 ")
    monkeypatch.setenv("LEDGER_CURRENCY_SYMBOL", "$")

    settings = LedgerSettings.from_env()

    assert settings.fetch_limit == 0
    assert settings.currency_symbol == "$"


def test_from_env_warns_on_invalid_limit(monkeypatch) -> None:
    """Invalid limits are logged and replaced with the default."""
    logger = _no_dotenv(monkeypatch)
    monkeypatch.setenv("LEDGER_FETCH_LIMIT", "lots")

    settings = LedgerSettings.from_env()

    assert settings.fetch_limit == 100
    logger.warning.assert_called_once()

    monkeypatch.setenv("LEDGER_FETCH_LIMIT", "-5")
    assert LedgerSettings.from_env().fetch_limit == 100
