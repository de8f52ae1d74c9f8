# gamehub/ui/components/game_card.py

"""
Library grid card: thumbnail, title and one-line description.

Thumbnails are fetched from local paths or URLs in a worker thread so the
grid stays responsive while images arrive.
"""

from __future__ import annotations

import logging
import os

import requests
from PyQt6.QtCore import QByteArray, Qt, QThread, pyqtSignal
from PyQt6.QtGui import QCursor, QMouseEvent, QPixmap
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout, QWidget

from gamehub.config import config
from gamehub.core.game import GameRecord
from gamehub.ui.theme import Theme
from gamehub.utils.i18n import t
from gamehub.version import __app_name__, __version__

__all__ = ["GameCard", "ThumbnailLoader"]

logger = logging.getLogger("gamehub.game_card")


class ThumbnailLoader(QThread):
    """A QThread to load image data from a path or URL without blocking the GUI."""

    loaded = pyqtSignal(QByteArray)

    def __init__(self, url_or_path: str, timeout: float | None = None):
        """
        Initializes the ThumbnailLoader.

        Args:
            url_or_path: The URL or local file path to load the image from.
            timeout: Network timeout in seconds (defaults to the configured value).
        """
        super().__init__()
        self.url_or_path = url_or_path
        self.timeout = timeout if timeout is not None else config.THUMBNAIL_TIMEOUT
        self._is_running = True

    def fetch(self) -> QByteArray:
        """Reads the image bytes; returns an empty array on any failure."""
        if not self.url_or_path:
            return QByteArray()

        try:
            if os.path.exists(self.url_or_path):
                with open(self.url_or_path, "rb") as f:
                    return QByteArray(f.read())
            if self.url_or_path.startswith(("http://", "https://")):
                headers = {"User-Agent": f"{__app_name__.replace(' ', '')}/{__version__}"}
                response = requests.get(self.url_or_path, headers=headers, timeout=self.timeout)
                response.raise_for_status()
                return QByteArray(response.content)
        except (OSError, requests.RequestException) as e:
            logger.debug("Thumbnail %s not loaded: %s", self.url_or_path, e)

        return QByteArray()

    def run(self):
        """Loads image data and emits it via the loaded signal."""
        data = self.fetch()
        if self._is_running:
            self.loaded.emit(data)

    def stop(self):
        """Stops the thread from emitting the loaded signal if it's no longer needed."""
        self._is_running = False


class GameCard(QFrame):
    """Clickable card representing one game in the library grid."""

    clicked = pyqtSignal(object)  # GameRecord

    def __init__(self, game: GameRecord, parent: QWidget | None = None):
        super().__init__(parent)
        self.game = game
        self.loader: ThumbnailLoader | None = None

        self.setObjectName("gameCard")
        self.setStyleSheet(Theme.card())
        self.setFixedWidth(Theme.CARD_WIDTH)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setToolTip(t("ui.library.play_now"))

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.thumb_label = QLabel(t("ui.library.loading_thumbnail"))
        self.thumb_label.setObjectName("cardThumb")
        self.thumb_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.thumb_label.setFixedSize(Theme.CARD_WIDTH, Theme.CARD_THUMB_HEIGHT)
        layout.addWidget(self.thumb_label)

        self.title_label = QLabel(game.title.upper())
        self.title_label.setObjectName("cardTitle")
        layout.addWidget(self.title_label)

        description = self.fontMetrics().elidedText(
            game.description, Qt.TextElideMode.ElideRight, Theme.CARD_WIDTH
        )
        self.description_label = QLabel(description)
        self.description_label.setObjectName("cardDescription")
        self.description_label.setToolTip(game.description)
        layout.addWidget(self.description_label)

    def load_thumbnail(self) -> None:
        """Starts the thumbnail download once; later calls are ignored."""
        if self.loader is not None:
            return
        self.loader = ThumbnailLoader(self.game.thumbnail)
        self.loader.loaded.connect(self._on_thumbnail_loaded)
        self.loader.start()

    def _on_thumbnail_loaded(self, data: QByteArray) -> None:
        pixmap = QPixmap()
        if data.isEmpty() or not pixmap.loadFromData(data):
            self.thumb_label.setText(self.game.title)
            return

        scaled = pixmap.scaled(
            self.thumb_label.size(),
            Qt.AspectRatioMode.KeepAspectRatioByExpanding,
            Qt.TransformationMode.SmoothTransformation,
        )
        self.thumb_label.setPixmap(scaled)

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.game)
        super().mousePressEvent(event)

    def shutdown(self) -> None:
        """Detaches from a running loader before the card goes away."""
        if self.loader is not None and self.loader.isRunning():
            self.loader.stop()
            self.loader.wait(int(config.THUMBNAIL_TIMEOUT * 1000))
