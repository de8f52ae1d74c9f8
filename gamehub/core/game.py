# gamehub/core/game.py

"""GameRecord dataclass for the Game Hub catalog.

A GameRecord is created once when the catalog is loaded and is never
changed afterwards. ``from_dict`` is the only place where raw dataset
entries are validated and normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from gamehub.core.exceptions import DataFormatError

__all__ = ["GameRecord", "REQUIRED_FIELDS", "OPTIONAL_FIELDS"]

REQUIRED_FIELDS: tuple[str, ...] = ("id", "title", "url")
OPTIONAL_FIELDS: tuple[str, ...] = ("description", "thumbnail")


@dataclass(frozen=True)
class GameRecord:
    """Represents one web-playable game in the catalog.

    Attributes:
        id: Unique identifier, stable for the whole session.
        title: Display name, never empty.
        description: Free-text description, may be empty.
        thumbnail: URI of the preview image.
        url: URI of the playable content shown in the player.
    """

    id: str
    title: str
    description: str = ""
    thumbnail: str = ""
    url: str = ""

    def __str__(self) -> str:
        return f"{self.title} ({self.id})"

    def matches(self, needle: str) -> bool:
        """Checks whether an already lower-cased needle occurs in title or description."""
        return needle in self.title.lower() or needle in self.description.lower()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int | None = None) -> GameRecord:
        """Builds a record from one raw dataset entry.

        Numeric ids are accepted and normalized to strings; all other
        fields must already be strings.

        Args:
            data: The raw entry.
            index: Position of the entry in its source, used in error messages.

        Returns:
            The validated GameRecord.

        Raises:
            DataFormatError: If a required field is missing or empty, or a
                field has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise DataFormatError(f"expected an object, got {type(data).__name__}", index)

        missing = [name for name in REQUIRED_FIELDS if name not in data or data[name] in (None, "")]
        if missing:
            raise DataFormatError(f"missing required field(s): {', '.join(missing)}", index)

        raw_id = data["id"]
        if isinstance(raw_id, bool) or not isinstance(raw_id, (str, int)):
            raise DataFormatError(f"field 'id' must be a string or integer, got {type(raw_id).__name__}", index)

        values: dict[str, str] = {"id": str(raw_id)}
        for name in ("title", "url") + OPTIONAL_FIELDS:
            value = data.get(name, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise DataFormatError(f"field '{name}' must be a string, got {type(value).__name__}", index)
            values[name] = value

        if not values["title"].strip():
            raise DataFormatError("field 'title' must not be blank", index)

        return cls(**values)
