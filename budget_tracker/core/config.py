"""Application configuration."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from budget_tracker.models.entities import DEFAULT_CURRENCY

MAX_ENTRY_HOURS = 24.0
DEFICIT_WARNING_MESSAGE = "Warning: this project is in deficit. Increase revenue or reduce costs."


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Budget Tracker Backend"
    app_env: str = "development"
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    default_currency: str = Field(default=DEFAULT_CURRENCY, min_length=3, max_length=3)
    max_entry_hours: float = Field(default=MAX_ENTRY_HOURS, gt=0)
    deficit_warning_message: str = Field(default=DEFICIT_WARNING_MESSAGE, min_length=1)
    # Keep .env support for comma-separated values (non-JSON).
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("default_currency")
    @classmethod
    def normalize_currency(cls, value: str) -> str:
        return value.upper()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""

    return Settings()
