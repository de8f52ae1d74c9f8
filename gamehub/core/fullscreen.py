# gamehub/core/fullscreen.py

"""Fullscreen capability interface.

The host window system owns the real fullscreen state. Requests may be
honoured later, silently ignored or refused outright, so implementations
report the outcome through change notifications rather than return values.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

__all__ = ["FullscreenCapability", "FullscreenListener"]

logger = logging.getLogger("gamehub.fullscreen")

FullscreenListener = Callable[[bool], None]


class FullscreenCapability(ABC):
    """Abstract base for anything that can put the application into fullscreen.

    Subclasses implement the request/query methods and call ``_notify``
    whenever the external state is known to have changed (or a request
    turned out to have no effect).
    """

    def __init__(self) -> None:
        self._listeners: list[FullscreenListener] = []

    @abstractmethod
    def request_enter(self) -> None:
        """Asks the host to enter fullscreen.

        Raises:
            FullscreenDenied: If the host refuses the request immediately.
        """

    @abstractmethod
    def request_exit(self) -> None:
        """Asks the host to leave fullscreen.

        Raises:
            FullscreenDenied: If the host refuses the request immediately.
        """

    @abstractmethod
    def is_active(self) -> bool:
        """Returns the host's current fullscreen state."""

    def subscribe(self, listener: FullscreenListener) -> Callable[[], None]:
        """Registers a callback receiving the new state on every change.

        Returns:
            A function that removes the callback again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, active: bool) -> None:
        for listener in list(self._listeners):
            try:
                listener(active)
            except Exception:
                logger.exception("Fullscreen listener %r failed", listener)
