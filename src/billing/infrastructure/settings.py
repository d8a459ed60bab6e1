"""Configuration using pydantic-settings.

Every setting can be overridden with a ``BILLING_``-prefixed
environment variable or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BILLING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_dir: Path = Field(Path("data"), description="Directory holding the JSON stores")
    log_level: LogLevel = Field(LogLevel.WARNING, description="Minimum level to log")
    log_json: bool = Field(False, description="Render log events as JSON lines")

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def bills_file(self) -> Path:
        return self.data_dir / "bills.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
