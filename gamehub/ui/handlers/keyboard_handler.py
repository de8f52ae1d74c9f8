"""Keyboard shortcut handler for MainWindow."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QKeyEvent, QKeySequence, QShortcut

from gamehub.core.view_state import Screen

if TYPE_CHECKING:
    from gamehub.ui.main_window import MainWindow

__all__ = ["KeyboardHandler"]


class KeyboardHandler:
    """Manages keyboard shortcuts and key events.

    Handles: F11 (fullscreen), Ctrl+F (focus search) and the ESC layers
    (leave the player first, then clear the search).

    Attributes:
        _mw: The parent MainWindow instance.
    """

    def __init__(self, mw: MainWindow) -> None:
        self._mw = mw

    def register_shortcuts(self) -> None:
        """Registers keyboard shortcuts that work regardless of focus."""
        mw = self._mw
        QShortcut(QKeySequence("F11"), mw).activated.connect(mw.view_actions.on_toggle_fullscreen)
        QShortcut(QKeySequence("Ctrl+F"), mw).activated.connect(self._focus_search)
        # Also fires while the web view holds keyboard focus
        QShortcut(QKeySequence(Qt.Key.Key_Escape), mw).activated.connect(self.handle_escape)

    def handle_key_press(self, event: QKeyEvent) -> bool:
        """Handles key press events for MainWindow shortcuts.

        Args:
            event: The key press event.

        Returns:
            True if event was handled, False to pass through.
        """
        if event.key() == Qt.Key.Key_Escape:
            return self.handle_escape()
        return False

    def handle_escape(self) -> bool:
        """Leaves the player, or clears the search while browsing.

        Returns:
            True if Esc had something to undo.
        """
        mw = self._mw
        if mw.controller.screen is Screen.PLAYING:
            mw.view_actions.on_back()
            return True
        if mw.controller.query:
            mw.view_actions.clear_search()
            return True
        return False

    def _focus_search(self) -> None:
        mw = self._mw
        if mw.controller.screen is Screen.PLAYING:
            return
        mw.search_entry.setFocus()
        mw.search_entry.selectAll()
