# gamehub/ui/components/game_grid.py

"""Responsive grid of GameCards for the library screen."""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QResizeEvent
from PyQt6.QtWidgets import QGridLayout, QScrollArea, QWidget

from gamehub.core.game import GameRecord
from gamehub.ui.components.game_card import GameCard
from gamehub.ui.theme import Theme

__all__ = ["GameGrid"]


class GameGrid(QScrollArea):
    """Scrollable grid that shows a subset of the catalog.

    One card is created per catalog entry and reused across searches, so
    thumbnails are downloaded once per session no matter how often the
    filter changes.
    """

    game_clicked = pyqtSignal(object)  # GameRecord

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setWidgetResizable(True)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        self._container = QWidget()
        self._layout = QGridLayout(self._container)
        self._layout.setSpacing(Theme.CARD_SPACING)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)
        self.setWidget(self._container)

        self._cards: dict[str, GameCard] = {}
        self._visible_ids: tuple[str, ...] = ()
        self._columns = 0

    def visible_games(self) -> list[GameRecord]:
        """Games currently laid out, in display order."""
        return [self._cards[game_id].game for game_id in self._visible_ids]

    def set_games(self, games: Sequence[GameRecord]) -> None:
        """Shows exactly *games*, in order; a no-op if nothing changed."""
        ids = tuple(game.id for game in games)
        if ids == self._visible_ids:
            return

        for game in games:
            if game.id not in self._cards:
                card = GameCard(game, self._container)
                card.clicked.connect(self.game_clicked.emit)
                self._cards[game.id] = card

        self._visible_ids = ids
        self._relayout()

    def _column_count(self) -> int:
        available = self.viewport().width()
        return max(1, (available + Theme.CARD_SPACING) // (Theme.CARD_WIDTH + Theme.CARD_SPACING))

    def _relayout(self) -> None:
        while self._layout.count():
            self._layout.takeAt(0)

        visible = set(self._visible_ids)
        for game_id, card in self._cards.items():
            card.setVisible(game_id in visible)

        self._columns = self._column_count()
        for position, game_id in enumerate(self._visible_ids):
            card = self._cards[game_id]
            row, col = divmod(position, self._columns)
            self._layout.addWidget(card, row, col)
            card.load_thumbnail()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        if self._column_count() != self._columns:
            self._relayout()

    def shutdown(self) -> None:
        for card in self._cards.values():
            card.shutdown()
