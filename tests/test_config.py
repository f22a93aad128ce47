from __future__ import annotations

import pytest
from pydantic import ValidationError

from budget_tracker.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.api_prefix == "/api/v1"
    assert settings.default_currency == "JPY"
    assert settings.max_entry_hours == 24
    assert settings.allowed_origins == ["http://localhost:3000", "http://127.0.0.1:3000"]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("DEFAULT_CURRENCY", "usd")
    monkeypatch.setenv("MAX_ENTRY_HOURS", "16")
    get_settings.cache_clear()

    try:
        settings = get_settings()
    finally:
        get_settings.cache_clear()

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.default_currency == "USD"
    assert settings.max_entry_hours == 16


def test_hour_limit_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(max_entry_hours=0)
