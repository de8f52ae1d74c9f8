from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gamehub.core.exceptions import SelectionInvalid
from gamehub.core.game import GameRecord
from gamehub.utils.i18n import t
from gamehub.utils.open_url import open_url

if TYPE_CHECKING:
    from gamehub.ui.main_window import MainWindow

logger = logging.getLogger("gamehub.view_actions")


class ViewActions:
    """Turns widget signals into view-controller events."""

    def __init__(self, main_window: "MainWindow"):
        self.main_window = main_window

    @property
    def controller(self):
        return self.main_window.controller

    def on_search(self, query: str) -> None:
        """Forwards every edit of the search field.

        Args:
            query: The search string, exactly as typed.
        """
        self.controller.set_query(query)

    def clear_search(self) -> None:
        """Clears the search field and shows the whole catalog again."""
        self.controller.set_query("")

    def on_game_clicked(self, game: GameRecord) -> None:
        """Opens the clicked game in the player.

        A card that no longer belongs to the filtered view (e.g. a click
        racing a keystroke) is ignored after logging.

        Args:
            game: The game behind the clicked card.
        """
        try:
            self.controller.select_game(game)
        except SelectionInvalid as e:
            logger.error(t("logs.view.selection_invalid", error=e))

    def on_back(self) -> None:
        """Back to Library."""
        self.controller.go_back()

    def on_logo_clicked(self) -> None:
        self.controller.logo_click()

    def on_toggle_fullscreen(self) -> None:
        """Forwards a fullscreen click or F11.

        The header button is checkable, so Qt has already flipped it; it is
        reset from the controller in case no new snapshot gets published.
        """
        self.controller.toggle_fullscreen()
        self.main_window.fullscreen_button.setChecked(self.controller.is_fullscreen)

    def open_in_browser(self, url: str) -> None:
        """Opens the running game in the system browser.

        Args:
            url: The game's content URL.
        """
        if not open_url(url):
            self.main_window.set_status(t("ui.player.open_external_failed"))
