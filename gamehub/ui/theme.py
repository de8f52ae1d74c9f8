"""Centralized theme constants and style factory.

Two-layer color system:
  Layer 1 (Palette): Raw color values, what the color IS.
  Layer 2 (Semantic): Purpose-based aliases, what the color MEANS.

To change a specific use case: modify the semantic alias.
To change the base color everywhere: modify the palette value.
"""

from __future__ import annotations

__all__ = ["Theme"]


class Theme:
    """Central color and style definitions for the application.

    The look is monochrome: near-black surfaces, white text and
    translucent white borders, with white as the only accent.
    """

    # ══════════════════════════════════════════════════════
    # LAYER 1: PALETTE
    # ══════════════════════════════════════════════════════

    BLACK = "#000000"
    INK = "#0a0a0a"
    INK_RAISED = "#141414"
    INK_HOVER = "#1f1f1f"

    WHITE = "#ffffff"
    WHITE_60 = "rgba(255, 255, 255, 0.6)"
    WHITE_40 = "rgba(255, 255, 255, 0.4)"
    WHITE_20 = "rgba(255, 255, 255, 0.2)"
    WHITE_10 = "rgba(255, 255, 255, 0.1)"
    WHITE_5 = "rgba(255, 255, 255, 0.05)"

    # ══════════════════════════════════════════════════════
    # LAYER 2: SEMANTIC
    # ══════════════════════════════════════════════════════

    BG_PRIMARY = INK
    BG_PANEL = INK_RAISED
    BG_PLAYER = BLACK
    BG_INPUT = WHITE_5
    BG_HOVER = WHITE_10

    BORDER = WHITE_10
    BORDER_FOCUS = WHITE_20

    ACCENT = WHITE
    ACCENT_TEXT = BLACK

    TEXT_PRIMARY = WHITE
    TEXT_SECONDARY = WHITE_60
    TEXT_MUTED = WHITE_40
    TEXT_FAINT = WHITE_20

    # Geometry
    CARD_WIDTH = 280
    CARD_THUMB_HEIGHT = 158  # 16:9
    CARD_SPACING = 24

    # ══════════════════════════════════════════════════════
    # STYLE FACTORIES
    # ══════════════════════════════════════════════════════

    @staticmethod
    def window() -> str:
        """Base stylesheet applied to the main window."""
        return f"""
            QMainWindow, QWidget#central {{ background-color: {Theme.BG_PRIMARY}; color: {Theme.TEXT_PRIMARY}; }}
            QScrollArea {{ background: transparent; border: none; }}
            QLabel {{ color: {Theme.TEXT_PRIMARY}; }}
        """

    @staticmethod
    def header() -> str:
        """Stylesheet for the sticky header bar."""
        return f"""
            QWidget#header {{ background-color: {Theme.BG_PANEL}; border-bottom: 1px solid {Theme.BORDER}; }}
        """

    @staticmethod
    def logo_button() -> str:
        """Stylesheet for the logo button that returns to the library."""
        return f"""
            QPushButton {{ background: transparent; border: none; color: {Theme.TEXT_PRIMARY};
                          font-size: 20px; font-weight: bold; text-align: left; }}
            QPushButton:hover {{ color: {Theme.TEXT_SECONDARY}; }}
        """

    @staticmethod
    def search_field() -> str:
        """Stylesheet for the rounded search input."""
        return f"""
            QLineEdit {{ background-color: {Theme.BG_INPUT}; border: 1px solid {Theme.BORDER};
                        border-radius: 16px; padding: 6px 14px; color: {Theme.TEXT_PRIMARY}; }}
            QLineEdit:focus {{ border: 1px solid {Theme.BORDER_FOCUS}; }}
        """

    @staticmethod
    def icon_button() -> str:
        """Stylesheet for flat header/player icon buttons."""
        return f"""
            QToolButton, QPushButton {{ background: transparent; border: none; border-radius: 8px;
                                       padding: 6px; color: {Theme.TEXT_SECONDARY}; }}
            QToolButton:hover, QPushButton:hover {{ background-color: {Theme.BG_HOVER}; color: {Theme.TEXT_PRIMARY}; }}
            QToolButton:checked {{ background-color: {Theme.BG_HOVER}; color: {Theme.TEXT_PRIMARY}; }}
        """

    @staticmethod
    def card() -> str:
        """Stylesheet for a game card in the library grid."""
        return f"""
            QFrame#gameCard {{ background: transparent; }}
            QLabel#cardThumb {{ background-color: {Theme.BG_INPUT}; border: 2px solid {Theme.BORDER};
                               border-radius: 12px; color: {Theme.TEXT_MUTED}; }}
            QFrame#gameCard:hover QLabel#cardThumb {{ border: 2px solid {Theme.ACCENT}; }}
            QLabel#cardTitle {{ font-size: 16px; font-weight: bold; }}
            QLabel#cardDescription {{ color: {Theme.TEXT_MUTED}; }}
        """

    @staticmethod
    def player_frame() -> str:
        """Stylesheet for the frame around the embedded game."""
        return f"""
            QFrame#playerFrame {{ background-color: {Theme.BG_PLAYER}; border: 2px solid {Theme.BORDER};
                                 border-radius: 20px; }}
        """

    @staticmethod
    def tag_chip() -> str:
        """Stylesheet for the small hashtag chips under the player."""
        return f"""
            QLabel {{ background-color: {Theme.BG_HOVER}; border-radius: 10px; padding: 3px 10px;
                     color: {Theme.TEXT_MUTED}; font-family: monospace; font-size: 11px; }}
        """

    # ------------------------------------------------------------------
    # Text styles
    # ------------------------------------------------------------------
    STYLE_HERO_TITLE = "font-size: 48px; font-weight: 900;"
    STYLE_HERO_SUBTITLE = f"font-size: 48px; font-weight: 900; color: {WHITE_40};"
    STYLE_TAGLINE = f"font-size: 16px; color: {WHITE_60};"
    STYLE_EMPTY = f"font-size: 18px; font-style: italic; color: {WHITE_40};"
    STYLE_FOOTER = f"font-family: monospace; font-size: 11px; letter-spacing: 2px; color: {WHITE_20};"
    STYLE_PLAYER_TITLE = "font-size: 22px; font-weight: bold;"
