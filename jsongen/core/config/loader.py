"""
Settings loader — reads jsongen.yml into a Settings model.

It reads YAML, validates against the Pydantic schema, and returns a
typed Settings object. A missing settings file is not an error when
searching; every field has a default.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from jsongen.core.models.settings import Settings

logger = logging.getLogger(__name__)

# Accepted settings filenames, in lookup order
SETTINGS_FILES = ("jsongen.yml", "jsongen.yaml")


class ConfigError(Exception):
    """Raised when the settings file is invalid or missing."""


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for a settings file starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to the settings file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for name in SETTINGS_FILES:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            return None  # filesystem root
        current = parent


def load_settings(path: Path | None = None, search: bool = True) -> Settings:
    """Load and validate settings.

    Args:
        path: Explicit path to a settings file. Must exist.
        search: When no path is given, search upward from cwd. If
            nothing is found, the defaults are returned.

    Returns:
        Validated Settings model.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_settings_file() if search else None
        if path is None:
            logger.debug("No settings file found — using defaults")
            return Settings()
    elif not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = Settings.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info("Loaded settings from %s", path)
    return settings
