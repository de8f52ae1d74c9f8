"""Tests for opening game URLs externally."""

from __future__ import annotations

import webbrowser
from unittest.mock import patch

import pytest

from gamehub.utils.open_url import is_web_url, open_url


@pytest.mark.parametrize(
    "url",
    ["https://example.com/game/", "http://localhost:8000/index.html"],
)
def test_web_urls_accepted(url):
    assert is_web_url(url)


@pytest.mark.parametrize(
    "url",
    ["", "/games/2048", "file:///etc/passwd", "javascript:alert(1)", "https://"],
)
def test_other_urls_refused(url):
    assert not is_web_url(url)


def test_refused_url_never_reaches_desktop():
    with patch("gamehub.utils.open_url.QDesktopServices.openUrl") as desktop:
        assert open_url("file:///etc/passwd") is False
    desktop.assert_not_called()


def test_desktop_services_used():
    with patch("gamehub.utils.open_url.QDesktopServices.openUrl", return_value=True) as desktop:
        assert open_url("https://example.com/") is True
    desktop.assert_called_once()


def test_webbrowser_fallback():
    with (
        patch("gamehub.utils.open_url.QDesktopServices.openUrl", return_value=False),
        patch("gamehub.utils.open_url.webbrowser.open", return_value=True) as fallback,
    ):
        assert open_url("https://example.com/") is True
    fallback.assert_called_once_with("https://example.com/")


def test_webbrowser_error():
    with (
        patch("gamehub.utils.open_url.QDesktopServices.openUrl", return_value=False),
        patch("gamehub.utils.open_url.webbrowser.open", side_effect=webbrowser.Error("none")),
    ):
        assert open_url("https://example.com/") is False
