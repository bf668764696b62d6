"""Define the settings of the tracker, read from the environment or a .env file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from zealandia.bird_data import DEFAULT_DATA_PATH

DATA_FILE_ENV_VAR = "ZEALANDIA_DATA_FILE"
LOG_LEVEL_ENV_VAR = "ZEALANDIA_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
"""Names of the log levels the tracker accepts."""


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the tracker."""

    data_path: Path
    """Filepath of the JSON file the bird tree is loaded from and saved to."""

    log_level: str
    """Name of the minimum level of log messages shown (e.g., 'INFO')."""


def load_settings() -> Settings:
    """Find the tracker's settings, loading any variables defined in a .env file.

    :return: Settings read from the environment, or their defaults
    :raises ValueError: If the log level is not one of LOG_LEVELS
    """
    load_dotenv()  # Read variables from a .env file and set them in os.environ
    data_path = os.getenv(DATA_FILE_ENV_VAR) or str(DEFAULT_DATA_PATH)
    log_level = os.getenv(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(
            f"Invalid {LOG_LEVEL_ENV_VAR} '{log_level}', expected one of: {', '.join(LOG_LEVELS)}"
        )

    return Settings(data_path=Path(data_path), log_level=log_level)
