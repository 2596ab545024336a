from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from autorange.exceptions import ConfigError


class AppConfig(BaseModel):
    """Application-specific configuration values."""

    name: str = "autorange"
    log_level: str = "INFO"


class AutocompleteConfig(BaseModel):
    """Autocomplete facade configuration values."""

    # Number of terms returned by top_matches() when no limit is given
    default_limit: int = Field(default=10, ge=0)


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="AUTORANGE_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    app: AppConfig = AppConfig()
    autocomplete: AutocompleteConfig = AutocompleteConfig()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only.

    Raises `ConfigError` if a value fails validation.
    """
    try:
        return Settings()  # type: ignore[call-arg]
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
