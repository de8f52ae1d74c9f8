"""UI handler package.

Handlers are instantiated once in MainWindow.__init__ and receive a
back-reference to the window.
"""

from __future__ import annotations

from gamehub.ui.handlers.keyboard_handler import KeyboardHandler

__all__ = [
    "KeyboardHandler",
]
