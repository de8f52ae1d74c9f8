"""Exception hierarchy for Game Hub.

All core errors derive from GameHubError so callers can catch broadly
or specifically depending on context.
"""

from __future__ import annotations

__all__ = ["GameHubError", "DataFormatError", "FullscreenDenied", "SelectionInvalid"]


class GameHubError(Exception):
    """Base class for all Game Hub exceptions."""


class DataFormatError(GameHubError):
    """Raised when the catalog source or one of its entries is malformed.

    Attributes:
        index: Position of the offending entry in the source, or None when
            the source as a whole is unusable.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        if index is not None:
            message = f"entry #{index}: {message}"
        super().__init__(message)


class FullscreenDenied(GameHubError):
    """Raised by a fullscreen capability that refuses an enter/exit request."""


class SelectionInvalid(GameHubError):
    """Raised when a game is selected that the catalog view does not offer."""
