"""Configuration loading utilities."""

import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from roomtypes.config.schema import Config


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".roomtypes" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file or fall back to defaults.

    Environment variables (``ROOMTYPES_*``) still apply on top of the
    defaults when the file is missing or invalid.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Failed to load config from {path}: {e}")
            logger.warning("Using default configuration.")

    return Config()


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.debug(f"Config saved: {path}")
