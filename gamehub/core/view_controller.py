# gamehub/core/view_controller.py

"""View controller: the Browsing/Playing state machine.

The controller owns the screen, the selected game, the search query and
the fullscreen mirror. Every change goes through one of its event methods,
and each change publishes a fresh ViewState to all subscribers.

Fullscreen is tracked as two values: the local intent set optimistically
by ``toggle_fullscreen`` and the state last confirmed by the capability.
A confirmation always replaces the intent, so the newest external
notification wins over any stale optimistic value.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from gamehub.core.exceptions import FullscreenDenied, SelectionInvalid
from gamehub.core.fullscreen import FullscreenCapability
from gamehub.core.game import GameRecord
from gamehub.core.view_state import Screen, ViewState
from gamehub.services.search_service import SearchService
from gamehub.utils.i18n import t

__all__ = ["ViewController", "StateListener"]

logger = logging.getLogger("gamehub.view_controller")

StateListener = Callable[[ViewState], None]


class ViewController:
    """Owns the top-level UI state and mediates every transition.

    Attributes:
        catalog: The full, read-only game list in display order.
        fullscreen: Optional external fullscreen capability.
    """

    def __init__(
        self,
        catalog: Sequence[GameRecord],
        fullscreen: FullscreenCapability | None = None,
    ) -> None:
        self.catalog: tuple[GameRecord, ...] = tuple(catalog)
        self.fullscreen = fullscreen

        self._screen: Screen = Screen.BROWSING
        self._selected_game: GameRecord | None = None
        self._query: str = ""

        self._fullscreen_intent: bool | None = None
        self._fullscreen_confirmed: bool = fullscreen.is_active() if fullscreen else False

        self._listeners: list[StateListener] = []
        self._last_published: ViewState = self.state
        self._unsubscribe_fullscreen: Callable[[], None] | None = None
        if fullscreen is not None:
            self._unsubscribe_fullscreen = fullscreen.subscribe(self.on_fullscreen_changed)

    # --- Read-only views ---

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def selected_game(self) -> GameRecord | None:
        return self._selected_game

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_fullscreen(self) -> bool:
        """Pending local intent if there is one, else the confirmed state."""
        if self._fullscreen_intent is not None:
            return self._fullscreen_intent
        return self._fullscreen_confirmed

    @property
    def filtered_games(self) -> list[GameRecord]:
        """The catalog filtered by the current query, recomputed on each access."""
        return SearchService.filter_games(self.catalog, self._query)

    @property
    def state(self) -> ViewState:
        """A new immutable snapshot of the current state."""
        return ViewState(
            screen=self._screen,
            selected_game=self._selected_game,
            query=self._query,
            is_fullscreen=self.is_fullscreen,
            visible_games=tuple(self.filtered_games),
        )

    # --- Observer ---

    def subscribe(self, listener: StateListener, *, replay: bool = False) -> Callable[[], None]:
        """Registers a callback that receives every published ViewState.

        Args:
            listener: Called with the new snapshot after each change.
            replay: If True, the listener is immediately called once with
                the current snapshot.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)
        if replay:
            listener(self._last_published)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        snapshot = self.state
        if snapshot == self._last_published:
            return
        self._last_published = snapshot

        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("State listener %r failed", listener)

    # --- Transitions ---

    def set_query(self, query: str) -> None:
        """Updates the search text; allowed on both screens.

        While playing the query is kept but has no visible effect until
        the user returns to the library.
        """
        if query == self._query:
            return
        self._query = query
        self._publish()

    def select_game(self, game: GameRecord) -> None:
        """Opens *game* in the player.

        Raises:
            SelectionInvalid: If not browsing, or *game* is not part of the
                current filtered view.
        """
        if self._screen is not Screen.BROWSING:
            raise SelectionInvalid(f"cannot select '{game}' while {self._screen.value}")
        if game not in self.catalog:
            raise SelectionInvalid(f"'{game}' is not in the catalog")
        if game not in self.filtered_games:
            raise SelectionInvalid(f"'{game}' is not in the filtered view for query {self._query!r}")

        self._selected_game = game
        self._screen = Screen.PLAYING
        logger.info(t("logs.view.game_selected", title=game.title, id=game.id))
        self._publish()

    def go_back(self) -> None:
        """Returns to the library. Never fails; a no-op while browsing."""
        self._show_library()

    def logo_click(self) -> None:
        """Returns to the library from anywhere, keeping the query."""
        self._show_library()

    def _show_library(self) -> None:
        if self._screen is Screen.BROWSING:
            return
        self._selected_game = None
        self._screen = Screen.BROWSING
        logger.debug("Returned to library")
        self._publish()

    # --- Fullscreen ---

    def toggle_fullscreen(self) -> None:
        """Asks the capability to enter or leave fullscreen.

        The direction follows the capability's real state. The local flag
        flips optimistically and is corrected by the next notification. A
        denial is logged and swallowed; the flag then falls back to the
        state the capability reports.
        """
        if self.fullscreen is None:
            logger.debug("No fullscreen capability available")
            return

        entering = not self.fullscreen.is_active()
        self._fullscreen_intent = entering
        self._publish()

        try:
            if entering:
                self.fullscreen.request_enter()
            else:
                self.fullscreen.request_exit()
        except FullscreenDenied as e:
            logger.info(t("logs.view.fullscreen_denied", error=e))
            self._fullscreen_intent = None
            self._fullscreen_confirmed = self.fullscreen.is_active()
            self._publish()

    def on_fullscreen_changed(self, active: bool) -> None:
        """Reconciles the mirror with a notification from the capability."""
        if self._fullscreen_intent is not None and self._fullscreen_intent != active:
            logger.debug("Fullscreen request not honoured (wanted %s, got %s)", self._fullscreen_intent, active)
        self._fullscreen_intent = None
        self._fullscreen_confirmed = active
        self._publish()

    def close(self) -> None:
        """Detaches from the capability and drops all listeners."""
        if self._unsubscribe_fullscreen is not None:
            self._unsubscribe_fullscreen()
            self._unsubscribe_fullscreen = None
        self._listeners.clear()
