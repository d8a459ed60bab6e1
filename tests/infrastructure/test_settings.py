"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from billing.infrastructure.settings import LogLevel, Settings, get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:

    def test_defaults(self, monkeypatch):
        for var in ("BILLING_DATA_DIR", "BILLING_LOG_LEVEL", "BILLING_LOG_JSON"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.data_dir == Path("data")
        assert settings.log_level == LogLevel.WARNING
        assert settings.log_json is False

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("BILLING_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("BILLING_LOG_LEVEL", "DEBUG")
        settings = get_settings()
        assert settings.bills_file == tmp_path / "bills.json"
        assert settings.products_file == tmp_path / "products.json"
        assert settings.log_level == LogLevel.DEBUG
