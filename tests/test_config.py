"""Tests for reading the tracker's settings."""

from pathlib import Path

import pytest

from zealandia import config


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep .env files on disk from leaking into the tests."""
    monkeypatch.setattr(config, "load_dotenv", lambda: False)


def test_defaults(monkeypatch):
    """Should fall back to the default data file and log level."""
    monkeypatch.delenv(config.DATA_FILE_ENV_VAR, raising=False)
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)

    settings = config.load_settings()

    assert settings.data_path == Path("birdData.json")
    assert settings.log_level == "WARNING"


def test_environment(monkeypatch, tmp_path):
    """Should read the data file and log level from the environment."""
    monkeypatch.setenv(config.DATA_FILE_ENV_VAR, str(tmp_path / "birds.json"))
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "debug")

    settings = config.load_settings()

    assert settings.data_path == tmp_path / "birds.json"
    assert settings.log_level == "DEBUG"


def test_log_level_is_normalized(monkeypatch):
    """Should accept a known log level regardless of case and padding."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, " info ")

    assert config.load_settings().log_level == "INFO"


def test_unknown_log_level(monkeypatch):
    """Should reject a log level the tracker does not know."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "verbose")

    with pytest.raises(ValueError, match="VERBOSE"):
        config.load_settings()
