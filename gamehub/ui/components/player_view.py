# gamehub/ui/components/player_view.py

"""
Player screen: the embedded content surface plus its surrounding controls.

Games run in a QWebEngineView on an off-the-record profile that shares no
cookies, storage or cache with anything else in the application. The page
may autoplay media, write to the clipboard and go fullscreen inside the
view; every other feature permission it asks for is denied.
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt, QUrl, pyqtSignal
from PyQt6.QtWebEngineCore import (
    QWebEngineFullScreenRequest,
    QWebEnginePage,
    QWebEngineProfile,
    QWebEngineSettings,
)
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from gamehub.core.game import GameRecord
from gamehub.ui.theme import Theme
from gamehub.utils.i18n import t

__all__ = ["PlayerView", "SandboxedPage", "EMBED_ENABLED_ATTRIBUTES", "EMBED_DISABLED_ATTRIBUTES"]

logger = logging.getLogger("gamehub.player")

BLANK_URL = QUrl("about:blank")

# Switched on for embedded games
EMBED_ENABLED_ATTRIBUTES: tuple[QWebEngineSettings.WebAttribute, ...] = (
    QWebEngineSettings.WebAttribute.JavascriptEnabled,
    QWebEngineSettings.WebAttribute.JavascriptCanAccessClipboard,
    QWebEngineSettings.WebAttribute.FullScreenSupportEnabled,
    QWebEngineSettings.WebAttribute.WebGLEnabled,
    QWebEngineSettings.WebAttribute.Accelerated2dCanvasEnabled,
)

# Switched off; disabling PlaybackRequiresUserGesture is what allows autoplay
EMBED_DISABLED_ATTRIBUTES: tuple[QWebEngineSettings.WebAttribute, ...] = (
    QWebEngineSettings.WebAttribute.PlaybackRequiresUserGesture,
    QWebEngineSettings.WebAttribute.JavascriptCanOpenWindows,
    QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls,
    QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls,
    QWebEngineSettings.WebAttribute.JavascriptCanPaste,
)

GAME_TAGS: tuple[str, ...] = ("#webgl", "#unblocked")


class SandboxedPage(QWebEnginePage):
    """Web page with the embed capability grants applied."""

    def __init__(self, profile: QWebEngineProfile, parent: QWidget | None = None):
        super().__init__(profile, parent)
        settings = self.settings()
        for attribute in EMBED_ENABLED_ATTRIBUTES:
            settings.setAttribute(attribute, True)
        for attribute in EMBED_DISABLED_ATTRIBUTES:
            settings.setAttribute(attribute, False)

        self.fullScreenRequested.connect(self._on_fullscreen_requested)
        self.featurePermissionRequested.connect(self._on_feature_permission_requested)

    @staticmethod
    def _on_fullscreen_requested(request: QWebEngineFullScreenRequest) -> None:
        # Fullscreen stays inside the view; the window is not affected.
        request.accept()

    def _on_feature_permission_requested(self, origin: QUrl, feature: QWebEnginePage.Feature) -> None:
        logger.info(t("logs.player.permission_denied", feature=feature.name, origin=origin.toString()))
        self.setFeaturePermission(origin, feature, QWebEnginePage.PermissionPolicy.PermissionDeniedByUser)


class PlayerView(QWidget):
    """Back button, title bar, embedded game and description."""

    back_requested = pyqtSignal()
    open_external_requested = pyqtSignal(str)  # url

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.game: GameRecord | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        # --- Top bar ---
        top_bar = QHBoxLayout()
        self.back_button = QPushButton(t("ui.player.back"))
        self.back_button.setStyleSheet(Theme.icon_button())
        self.back_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.back_button.clicked.connect(self.back_requested.emit)
        top_bar.addWidget(self.back_button)
        top_bar.addStretch()

        self.header_title = QLabel()
        self.header_title.setStyleSheet(Theme.STYLE_PLAYER_TITLE)
        top_bar.addWidget(self.header_title)

        self.external_button = QPushButton(t("ui.player.open_external"))
        self.external_button.setToolTip(t("ui.player.open_external_tooltip"))
        self.external_button.setStyleSheet(Theme.icon_button())
        self.external_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self.external_button.clicked.connect(self._on_external_clicked)
        top_bar.addWidget(self.external_button)
        layout.addLayout(top_bar)

        # --- Embedded surface ---
        frame = QFrame()
        frame.setObjectName("playerFrame")
        frame.setStyleSheet(Theme.player_frame())
        frame_layout = QVBoxLayout(frame)
        frame_layout.setContentsMargins(2, 2, 2, 2)

        self.web_view = QWebEngineView()
        # No storage name: off-the-record, nothing persists or leaks to disk
        self.profile = QWebEngineProfile()
        page = SandboxedPage(self.profile, self.web_view)
        # The profile must outlive the page, so the page owns it
        self.profile.setParent(page)
        self.web_view.setPage(page)
        frame_layout.addWidget(self.web_view)
        layout.addWidget(frame, stretch=1)

        # --- Details ---
        details = QHBoxLayout()
        text_column = QVBoxLayout()
        self.title_label = QLabel()
        self.title_label.setStyleSheet(Theme.STYLE_PLAYER_TITLE)
        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(f"color: {Theme.TEXT_SECONDARY};")
        text_column.addWidget(self.title_label)
        text_column.addWidget(self.description_label)
        details.addLayout(text_column, stretch=1)

        for tag in GAME_TAGS:
            chip = QLabel(tag)
            chip.setStyleSheet(Theme.tag_chip())
            details.addWidget(chip, alignment=Qt.AlignmentFlag.AlignBottom)
        layout.addLayout(details)

    def show_game(self, game: GameRecord) -> None:
        """Loads *game* into the surface unless it is already showing."""
        if self.game == game:
            return
        self.game = game
        self.header_title.setText(game.title.upper())
        self.title_label.setText(game.title.upper())
        self.description_label.setText(game.description)
        self.web_view.setUrl(QUrl(game.url))
        logger.debug("Loading %s", game.url)

    def clear(self) -> None:
        """Unloads the current game so it stops running in the background."""
        if self.game is None:
            return
        self.game = None
        self.web_view.setUrl(BLANK_URL)
        self.header_title.clear()
        self.title_label.clear()
        self.description_label.clear()

    def _on_external_clicked(self) -> None:
        if self.game is not None:
            self.open_external_requested.emit(self.game.url)
