"""
Main application window for Game Hub.

The window is a pure view of the ViewController: widget signals are sent
to the controller through ViewActions, and ``render`` redraws the window
from every ViewState the controller publishes.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent, QKeyEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from gamehub.core.game import GameRecord
from gamehub.core.view_controller import ViewController
from gamehub.core.view_state import Screen, ViewState
from gamehub.ui.actions import ViewActions
from gamehub.ui.components.game_grid import GameGrid
from gamehub.ui.components.player_view import PlayerView
from gamehub.ui.fullscreen_capability import WindowFullscreenCapability
from gamehub.ui.handlers import KeyboardHandler
from gamehub.ui.theme import Theme
from gamehub.utils.i18n import t

STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    """Primary application window: header, library/player stack and footer.

    Attributes:
        controller: The view-state machine this window renders.
        fullscreen: Fullscreen capability driving this window.
        view_actions: Routes widget signals to the controller.
        keyboard_handler: Shortcuts and ESC handling.
    """

    def __init__(self, catalog: Sequence[GameRecord]):
        """Builds the UI and wires it to a new controller for *catalog*."""
        super().__init__()
        self.setWindowTitle(t("ui.main_window.title"))
        self.resize(1400, 900)
        self.setStyleSheet(Theme.window())

        self.fullscreen = WindowFullscreenCapability(self)
        self.controller = ViewController(catalog, self.fullscreen)

        self.view_actions = ViewActions(self)
        self.keyboard_handler = KeyboardHandler(self)

        self._create_ui()
        self.keyboard_handler.register_shortcuts()

        self._unsubscribe = self.controller.subscribe(self.render, replay=True)

    def _create_ui(self) -> None:
        central = QWidget()
        central.setObjectName("central")
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        layout.addWidget(self._create_header())

        self.stack = QStackedWidget()
        self.library_page = self._create_library_page()
        self.player_view = PlayerView()
        self.player_view.setContentsMargins(40, 24, 40, 24)
        self.player_view.back_requested.connect(self.view_actions.on_back)
        self.player_view.open_external_requested.connect(self.view_actions.open_in_browser)
        self.stack.addWidget(self.library_page)
        self.stack.addWidget(self.player_view)
        layout.addWidget(self.stack, stretch=1)

        self.footer_label = QLabel(t("ui.footer.copyright", year=date.today().year))
        self.footer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.footer_label.setStyleSheet(Theme.STYLE_FOOTER)
        self.footer_label.setContentsMargins(0, 16, 0, 16)
        layout.addWidget(self.footer_label)

    def _create_header(self) -> QWidget:
        header = QWidget()
        header.setObjectName("header")
        header.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        header.setStyleSheet(Theme.header())
        row = QHBoxLayout(header)
        row.setContentsMargins(24, 14, 24, 14)

        self.logo_button = QPushButton(t("ui.header.logo"))
        self.logo_button.setStyleSheet(Theme.logo_button())
        self.logo_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.logo_button.clicked.connect(self.view_actions.on_logo_clicked)
        row.addWidget(self.logo_button)
        row.addStretch()

        self.search_entry = QLineEdit()
        self.search_entry.setPlaceholderText(t("ui.header.search_placeholder"))
        self.search_entry.setClearButtonEnabled(True)
        self.search_entry.setMaximumWidth(440)
        self.search_entry.setStyleSheet(Theme.search_field())
        self.search_entry.textChanged.connect(self.view_actions.on_search)
        row.addWidget(self.search_entry, stretch=1)
        row.addStretch()

        self.fullscreen_button = QToolButton()
        self.fullscreen_button.setText("⛶")
        self.fullscreen_button.setCheckable(True)
        self.fullscreen_button.setToolTip(t("ui.header.fullscreen_tooltip"))
        self.fullscreen_button.setStyleSheet(Theme.icon_button())
        self.fullscreen_button.clicked.connect(self.view_actions.on_toggle_fullscreen)
        row.addWidget(self.fullscreen_button)

        return header

    def _create_library_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(40, 40, 40, 24)
        layout.setSpacing(12)

        hero_title = QLabel(t("ui.library.hero_title").upper())
        hero_title.setStyleSheet(Theme.STYLE_HERO_TITLE)
        hero_subtitle = QLabel(t("ui.library.hero_subtitle").upper())
        hero_subtitle.setStyleSheet(Theme.STYLE_HERO_SUBTITLE)
        tagline = QLabel(t("ui.library.tagline"))
        tagline.setWordWrap(True)
        tagline.setMaximumWidth(620)
        tagline.setStyleSheet(Theme.STYLE_TAGLINE)
        layout.addWidget(hero_title)
        layout.addWidget(hero_subtitle)
        layout.addWidget(tagline)
        layout.addSpacing(24)

        self.game_grid = GameGrid()
        self.game_grid.game_clicked.connect(self.view_actions.on_game_clicked)
        layout.addWidget(self.game_grid, stretch=1)

        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label.setStyleSheet(Theme.STYLE_EMPTY)
        self.empty_label.hide()
        layout.addWidget(self.empty_label)

        return page

    # --- Rendering ---

    def render(self, state: ViewState) -> None:
        """Redraws the window from a controller snapshot."""
        if self.search_entry.text() != state.query:
            self.search_entry.blockSignals(True)
            self.search_entry.setText(state.query)
            self.search_entry.blockSignals(False)

        self.fullscreen_button.setChecked(state.is_fullscreen)

        if state.screen is Screen.PLAYING:
            self.player_view.show_game(state.selected_game)
            self.stack.setCurrentWidget(self.player_view)
            self.setWindowTitle(t("ui.main_window.title_playing", title=state.selected_game.title))
            return

        self.player_view.clear()
        self.stack.setCurrentWidget(self.library_page)
        self.setWindowTitle(t("ui.main_window.title"))

        self.game_grid.set_games(state.visible_games)
        self.game_grid.setVisible(state.has_results)
        self.empty_label.setVisible(not state.has_results)
        if not state.has_results:
            self.empty_label.setText(t("ui.library.no_results", query=state.query))

    def set_status(self, message: str) -> None:
        """Shows a transient message in the status bar."""
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)

    # --- Qt overrides ---

    def keyPressEvent(self, event: Optional[QKeyEvent]) -> None:
        if event is not None and self.keyboard_handler.handle_key_press(event):
            return
        super().keyPressEvent(event)

    def closeEvent(self, event: Optional[QCloseEvent]) -> None:
        self._unsubscribe()
        self.controller.close()
        self.fullscreen.detach()
        self.game_grid.shutdown()
        super().closeEvent(event)
