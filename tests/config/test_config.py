from __future__ import annotations

import logging

import pytest

from readsy.config import (
    InvalidConfigurationError,
    get_google_books_config,
    get_log_level,
    get_open_library_config,
    get_reconciliation_config,
    optional_env_float,
    optional_env_var,
)


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    assert optional_env_var("EXAMPLE_VAR") is None


def test_optional_env_var_strips_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_float_default_and_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EXAMPLE_FLOAT", raising=False)
    assert optional_env_float("EXAMPLE_FLOAT", 1.5) == 1.5

    monkeypatch.setenv("EXAMPLE_FLOAT", "2.25")
    assert optional_env_float("EXAMPLE_FLOAT", 1.5) == 2.25


@pytest.mark.parametrize("raw", ["soon", "0", "-3"])
def test_optional_env_float_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, raw: str
) -> None:
    monkeypatch.setenv("EXAMPLE_FLOAT", raw)

    with pytest.raises(InvalidConfigurationError) as exc:
        optional_env_float("EXAMPLE_FLOAT", 1.0)

    assert "EXAMPLE_FLOAT" in str(exc.value)


def test_reconciliation_timeout_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("READSY_SOURCE_TIMEOUT_SECONDS", "3")

    assert get_reconciliation_config().source_timeout_seconds == 3.0


def test_reconciliation_timeout_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("READSY_SOURCE_TIMEOUT_SECONDS", raising=False)

    assert get_reconciliation_config().source_timeout_seconds == 15.0


def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("READSY_LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG

    monkeypatch.delenv("READSY_LOG_LEVEL")
    assert get_log_level() == logging.INFO


def test_log_level_rejects_unknown_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("READSY_LOG_LEVEL", "chatty")

    with pytest.raises(InvalidConfigurationError):
        get_log_level()


def test_open_library_config_identifies_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENLIBRARY_CONTACT", "librarian@example.org")

    config = get_open_library_config()

    assert config.resilience.base_url == "https://openlibrary.org"
    assert config.resilience.default_headers is not None
    assert config.resilience.default_headers["User-Agent"].endswith(
        "(contact: librarian@example.org)"
    )
    assert config.resilience.ratelimit is not None


def test_google_books_config_reads_optional_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOOGLE_BOOKS_API_KEY", raising=False)
    assert get_google_books_config().api_key is None

    monkeypatch.setenv("GOOGLE_BOOKS_API_KEY", "secret")
    config = get_google_books_config()
    assert config.api_key == "secret"
    assert config.resilience.base_url == "https://www.googleapis.com/books/v1"
