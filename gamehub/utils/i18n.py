"""
Internationalization (i18n) for Game Hub.

Translation files live under resources/i18n/:
1. Shared, language-agnostic files in the root (e.g. logs.json)
2. Locale files in resources/i18n/{locale}/*.json

Nested JSON objects are flattened into dot-separated keys at load time,
so lookups are a single dictionary access.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "available_locales", "init_i18n", "t"]

logger = logging.getLogger("gamehub.i18n")

FALLBACK_LOCALE = "en"


class I18n:
    """Flat key/value translation table for one locale.

    English strings are always loaded first and the requested locale is
    layered on top, so a partially translated locale still renders.
    """

    def __init__(self, locale: str = FALLBACK_LOCALE) -> None:
        """Initialize I18n with a specific locale code.

        Args:
            locale: Name of a directory below resources/i18n/.
        """
        from gamehub.utils.paths import get_resources_dir

        self.locale = locale
        self.i18n_root: Path = get_resources_dir() / "i18n"
        self.strings: dict[str, str] = {}

        self._load_directory(self.i18n_root)
        self._load_directory(self.i18n_root / FALLBACK_LOCALE)
        if locale != FALLBACK_LOCALE:
            if locale not in available_locales():
                logger.warning("Unknown locale '%s', using '%s'", locale, FALLBACK_LOCALE)
            self._load_directory(self.i18n_root / locale)

    def _load_directory(self, directory: Path) -> None:
        """Reads every *.json file in *directory* into the flat table."""
        if not directory.is_dir():
            return
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    self._flatten(json.load(f), prefix="")
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)

    def _flatten(self, node: Any, prefix: str) -> None:
        if isinstance(node, dict):
            for key, value in node.items():
                self._flatten(value, f"{prefix}{key}.")
        elif isinstance(node, str):
            self.strings[prefix.rstrip(".")] = node

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a translated string by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'ui.header.search_placeholder').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Translated string, or '[key]' if not found.
        """
        value = self.strings.get(key)
        if value is None:
            return f"[{key}]"
        if not kwargs:
            return value
        try:
            return value.format(**kwargs)
        except (ValueError, KeyError, IndexError):
            return value


_i18n_instance: I18n | None = None


def available_locales() -> list[str]:
    """Lists the locale directories shipped in resources/i18n/."""
    from gamehub.utils.paths import get_resources_dir

    root = get_resources_dir() / "i18n"
    return sorted(p.name for p in root.iterdir() if p.is_dir())


def init_i18n(locale: str = FALLBACK_LOCALE) -> I18n:
    """Initialize the global i18n instance.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a translated string using the global i18n instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Translated string, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
