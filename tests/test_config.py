"""Test process settings."""

from pathlib import Path

import pytest

from golfcup.config import GolfcupSettings, get_settings, reset_settings, update_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GOLFCUP_CONFIG", "GOLFCUP_ENV", "GOLFCUP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = GolfcupSettings()

    assert settings.config_path == Path("config/tournament.yaml")
    assert settings.environment is None
    assert settings.log_level == "WARNING"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOLFCUP_CONFIG", "/etc/golfcup/tournament.yaml")
    monkeypatch.setenv("GOLFCUP_ENV", "dev")
    monkeypatch.setenv("GOLFCUP_LOG_LEVEL", "debug")

    settings = GolfcupSettings()
    assert settings.config_path == Path("/etc/golfcup/tournament.yaml")
    assert settings.environment == "dev"
    assert settings.log_level == "debug"


def test_update_and_reset_settings() -> None:
    update_settings(log_level="INFO")
    assert get_settings().log_level == "INFO"

    with pytest.raises(ValueError, match="Unknown setting"):
        update_settings(colour="green")

    reset_settings()
    assert isinstance(get_settings(), GolfcupSettings)
