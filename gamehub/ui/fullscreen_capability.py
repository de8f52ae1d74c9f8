# gamehub/ui/fullscreen_capability.py

"""Fullscreen capability backed by a Qt top-level window.

Window managers may apply ``showFullScreen`` late, partially or not at
all. Changes are reported from WindowStateChange events, and every
request is followed by a delayed re-check of the real window state so an
ignored request still produces a notification.
"""

from __future__ import annotations

import logging
from typing import Callable

from PyQt6.QtCore import QEvent, QObject, QTimer
from PyQt6.QtWidgets import QWidget

from gamehub.core.exceptions import FullscreenDenied
from gamehub.core.fullscreen import FullscreenCapability

__all__ = ["WindowFullscreenCapability", "CONFIRM_DELAY_MS"]

logger = logging.getLogger("gamehub.fullscreen")

CONFIRM_DELAY_MS = 400


class _WindowStateFilter(QObject):
    """Event filter forwarding WindowStateChange events to a callback."""

    def __init__(self, on_change: Callable[[], None]) -> None:
        super().__init__()
        self._on_change = on_change

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.WindowStateChange:
            self._on_change()
        return False


class WindowFullscreenCapability(FullscreenCapability):
    """Puts a top-level QWidget into and out of fullscreen.

    Attributes:
        window: The top-level widget whose window state is controlled.
    """

    def __init__(self, window: QWidget, confirm_delay_ms: int = CONFIRM_DELAY_MS) -> None:
        super().__init__()
        self.window = window
        self._was_maximized = False

        self._filter = _WindowStateFilter(self._on_window_state_changed)
        window.installEventFilter(self._filter)

        self._confirm_timer = QTimer()
        self._confirm_timer.setSingleShot(True)
        self._confirm_timer.setInterval(confirm_delay_ms)
        self._confirm_timer.timeout.connect(self._confirm)

    def request_enter(self) -> None:
        if not self.window.isVisible():
            raise FullscreenDenied("window is not visible")
        self._was_maximized = self.window.isMaximized()
        logger.debug("Requesting fullscreen")
        self.window.showFullScreen()
        self._confirm_timer.start()

    def request_exit(self) -> None:
        if not self.window.isVisible():
            raise FullscreenDenied("window is not visible")
        logger.debug("Leaving fullscreen")
        if self._was_maximized:
            self.window.showMaximized()
        else:
            self.window.showNormal()
        self._confirm_timer.start()

    def is_active(self) -> bool:
        return self.window.isFullScreen()

    def _on_window_state_changed(self) -> None:
        self._notify(self.is_active())

    def _confirm(self) -> None:
        self._notify(self.is_active())

    def detach(self) -> None:
        """Stops watching the window."""
        self._confirm_timer.stop()
        self.window.removeEventFilter(self._filter)
