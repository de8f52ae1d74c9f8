# gamehub/core/catalog.py

"""Catalog store: loads the static game dataset once at startup.

Malformed entries are skipped one by one and logged; duplicate ids keep
the first occurrence. Only a source that cannot be read at all raises
DataFormatError, so a partially broken dataset still yields a usable
catalog.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from gamehub.core.exceptions import DataFormatError
from gamehub.core.game import GameRecord
from gamehub.utils.i18n import t

__all__ = ["CatalogStore", "load_catalog_file"]

logger = logging.getLogger("gamehub.catalog")


class CatalogStore:
    """Read-only, ordered collection of GameRecords.

    The store is filled exactly once through ``load``; there is no API to
    add, remove or replace records afterwards.

    Attributes:
        errors: Per-entry problems found by the last ``load`` call.
    """

    def __init__(self) -> None:
        self._games: tuple[GameRecord, ...] = ()
        self.errors: list[DataFormatError] = []
        self._loaded = False

    @property
    def games(self) -> tuple[GameRecord, ...]:
        """All records in insertion order."""
        return self._games

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(self._games)

    def load(self, source: Iterable[Any]) -> tuple[GameRecord, ...]:
        """Validates the raw entries of *source* and stores the good ones.

        Args:
            source: Iterable of raw entries (usually dicts decoded from JSON).

        Returns:
            The loaded records, in source order.

        Raises:
            DataFormatError: If the store was already loaded or *source*
                is not iterable.
        """
        if self._loaded:
            raise DataFormatError("catalog is already loaded")
        if isinstance(source, (str, bytes)) or not isinstance(source, Iterable):
            raise DataFormatError(f"catalog source must be a list of entries, got {type(source).__name__}")

        games: list[GameRecord] = []
        seen_ids: set[str] = set()
        errors: list[DataFormatError] = []

        for index, entry in enumerate(source):
            try:
                game = GameRecord.from_dict(entry, index)
            except DataFormatError as e:
                errors.append(e)
                logger.warning(t("logs.catalog.entry_skipped", error=e))
                continue

            if game.id in seen_ids:
                e = DataFormatError(f"duplicate id '{game.id}'", index)
                errors.append(e)
                logger.warning(t("logs.catalog.entry_skipped", error=e))
                continue

            seen_ids.add(game.id)
            games.append(game)

        self._games = tuple(games)
        self.errors = errors
        self._loaded = True

        logger.info(t("logs.catalog.loaded", count=len(games), skipped=len(errors)))
        return self._games


def load_catalog_file(path: Path) -> CatalogStore:
    """Reads a JSON dataset file into a new CatalogStore.

    The file holds either a list of entries or an object with a
    ``games`` list.

    Args:
        path: Location of the JSON dataset.

    Returns:
        The loaded store.

    Raises:
        DataFormatError: If the file cannot be read or has the wrong shape.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise DataFormatError(f"cannot read catalog file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise DataFormatError(f"catalog file '{path}' is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("games")
    if not isinstance(data, list):
        raise DataFormatError(f"catalog file '{path}' must contain a list of games")

    store = CatalogStore()
    store.load(data)
    return store
