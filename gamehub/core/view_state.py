"""Immutable view-state snapshots published by the view controller."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gamehub.core.game import GameRecord

__all__ = ["Screen", "ViewState"]


class Screen(Enum):
    """The two top-level screens of the application."""

    BROWSING = "browsing"
    PLAYING = "playing"


@dataclass(frozen=True)
class ViewState:
    """Read-only picture of the UI state at one moment.

    ``visible_games`` is derived from the catalog and ``query`` when the
    snapshot is taken; the controller itself never stores it.
    """

    screen: Screen = Screen.BROWSING
    selected_game: GameRecord | None = None
    query: str = ""
    is_fullscreen: bool = False
    visible_games: tuple[GameRecord, ...] = ()

    def __post_init__(self):
        if (self.selected_game is not None) != (self.screen is Screen.PLAYING):
            raise ValueError(f"selected_game must be set exactly when playing (screen={self.screen.value})")

    @property
    def is_playing(self) -> bool:
        return self.screen is Screen.PLAYING

    @property
    def has_results(self) -> bool:
        """False when the current query filters out every game."""
        return bool(self.visible_games)
