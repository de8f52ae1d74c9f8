# gamehub/utils/open_url.py

"""Opens game URLs in the system's default browser."""

from __future__ import annotations

import logging
import webbrowser
from urllib.parse import urlparse

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices

logger = logging.getLogger("gamehub.open_url")

__all__ = ["open_url", "is_web_url"]

_WEB_SCHEMES = frozenset({"http", "https"})


def is_web_url(url: str) -> bool:
    """Checks that *url* is an absolute http(s) URL with a host."""
    parsed = urlparse(url)
    return parsed.scheme.lower() in _WEB_SCHEMES and bool(parsed.netloc)


def open_url(url: str) -> bool:
    """Opens a URL in the system's default browser.

    Only http(s) URLs are handed to the desktop; anything else (file:,
    javascript:, relative paths) is refused.

    Args:
        url: The URL to open.

    Returns:
        True if the browser was launched successfully, False otherwise.
    """
    if not is_web_url(url):
        logger.warning("Refusing to open non-web URL %r", url)
        return False

    if QDesktopServices.openUrl(QUrl(url)):
        return True

    logger.warning("Desktop services could not open %s, falling back to webbrowser", url)
    try:
        return webbrowser.open(url)
    except webbrowser.Error as e:
        logger.error("Failed to open URL %s: %s", url, e)
        return False
