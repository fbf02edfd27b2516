"""Process settings for golfcup."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GolfcupSettings(BaseSettings):
    """Settings read from ``GOLFCUP_*`` environment variables or ``.env``."""

    config_path: Path = Field(
        default=Path("config/tournament.yaml"),
        description="Base tournament configuration file",
        alias="GOLFCUP_CONFIG",
    )

    environment: str | None = Field(
        default=None,
        description="Environment overlay, e.g. 'dev' loads tournament.dev.yaml",
        alias="GOLFCUP_ENV",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the command line",
        alias="GOLFCUP_LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = GolfcupSettings()


def get_settings() -> GolfcupSettings:
    """Get the current settings."""
    return settings


def update_settings(**kwargs) -> None:
    """Update settings in place."""
    global settings
    for key, value in kwargs.items():
        if key in GolfcupSettings.model_fields:
            setattr(settings, key, value)
        else:
            raise ValueError(f"Unknown setting: {key}")


def reset_settings() -> None:
    """Reset settings to the environment defaults."""
    global settings
    settings = GolfcupSettings()
