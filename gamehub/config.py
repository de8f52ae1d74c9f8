"""
Configuration - paths, persisted settings and environment overrides.

Settings are read from data/settings.json, then environment variables
(optionally from a .env file) take precedence.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger("gamehub.config")


__all__ = ["Config", "config"]

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages paths, the catalog location and UI start-up options.
    """

    APP_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = APP_DIR / "data"
    RESOURCES_DIR: Path = APP_DIR / "resources"

    SETTINGS_FILE: Path = DATA_DIR / "settings.json"
    CATALOG_FILE: Path = RESOURCES_DIR / "games.json"

    # Default values
    UI_LANGUAGE: str = "en"
    START_FULLSCREEN: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path | None = None

    # Seconds before a thumbnail download is abandoned
    THUMBNAIL_TIMEOUT: float = 10.0

    def __post_init__(self):
        """Load settings, then apply environment overrides."""
        self._load_settings()

        load_dotenv()
        self._apply_env()

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not load settings from %s: %s", self.SETTINGS_FILE, e)
            return

        if not isinstance(data, dict):
            logger.error("Ignoring settings file %s: expected a JSON object", self.SETTINGS_FILE)
            return

        self.UI_LANGUAGE = self._setting(data, "ui_language", str, self.UI_LANGUAGE)
        self.START_FULLSCREEN = self._setting(data, "start_fullscreen", bool, self.START_FULLSCREEN)
        self.LOG_LEVEL = self._setting(data, "log_level", str, self.LOG_LEVEL)

        timeout = data.get("thumbnail_timeout", self.THUMBNAIL_TIMEOUT)
        try:
            if isinstance(timeout, bool):
                raise TypeError("a boolean is not a number of seconds")
            timeout = float(timeout)
            if not timeout > 0:
                raise ValueError("must be positive")
            self.THUMBNAIL_TIMEOUT = timeout
        except (TypeError, ValueError) as e:
            logger.error("Ignoring setting 'thumbnail_timeout' (%r): %s", timeout, e)

        catalog_file = self._setting(data, "catalog_file", str, "")
        if catalog_file:
            self.CATALOG_FILE = Path(catalog_file)

        log_file = self._setting(data, "log_file", str, "")
        if log_file:
            self.LOG_FILE = Path(log_file)

    @staticmethod
    def _setting(data: dict, key: str, expected: type, default):
        """Returns data[key] if it has the expected type, else logs and returns *default*."""
        if key not in data:
            return default
        value = data[key]
        if not isinstance(value, expected):
            logger.error("Ignoring setting '%s': expected %s, got %r", key, expected.__name__, value)
            return default
        return value

    def _apply_env(self) -> None:
        """Environment variables win over settings.json."""
        catalog = os.getenv("GAMEHUB_CATALOG")
        if catalog:
            self.CATALOG_FILE = Path(catalog)

        level = os.getenv("GAMEHUB_LOG_LEVEL")
        if level:
            self.LOG_LEVEL = level

        fullscreen = os.getenv("GAMEHUB_FULLSCREEN")
        if fullscreen:
            self.START_FULLSCREEN = fullscreen.strip().lower() in _TRUTHY

    def save(self) -> None:
        """Save current configuration to JSON file."""
        data = {
            "ui_language": self.UI_LANGUAGE,
            "start_fullscreen": self.START_FULLSCREEN,
            "log_level": self.LOG_LEVEL,
            "thumbnail_timeout": self.THUMBNAIL_TIMEOUT,
            "catalog_file": str(self.CATALOG_FILE),
            "log_file": str(self.LOG_FILE) if self.LOG_FILE else "",
        }

        try:
            self.DATA_DIR.mkdir(parents=True, exist_ok=True)
            with open(self.SETTINGS_FILE, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error("Could not save settings to %s: %s", self.SETTINGS_FILE, e)


# Global instance
config = Config()
