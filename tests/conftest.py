# tests/conftest.py
import os
from typing import Callable

# Ensure Qt can run headless (CI runners have no display server)
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("QTWEBENGINE_CHROMIUM_FLAGS", "--no-sandbox")

import pytest

# QtWebEngine must be imported before the QApplication is created
import PyQt6.QtWebEngineWidgets  # noqa: F401
from PyQt6.QtWidgets import QApplication
from pytestqt.qtbot import QtBot

from gamehub.core.exceptions import FullscreenDenied
from gamehub.core.fullscreen import FullscreenCapability
from gamehub.core.game import GameRecord


@pytest.fixture(scope="session")
def qapp():
    """QApplication instance for all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def qtbot(qapp, request):
    """Provide qtbot fixture with automatic cleanup."""
    bot = QtBot(request)
    yield bot
    if hasattr(bot, "cleanup"):
        bot.cleanup()


class FakeFullscreen(FullscreenCapability):
    """Scriptable stand-in for the host window's fullscreen feature.

    By default requests are only recorded; the test decides when (and
    with which outcome) the host "answers" by calling ``host_reports``.
    Setting ``auto_apply`` makes requests succeed immediately, and
    ``deny`` makes them raise FullscreenDenied.
    """

    def __init__(self, active: bool = False) -> None:
        super().__init__()
        self.active = active
        self.calls: list[str] = []
        self.auto_apply = False
        self.deny = False

    def request_enter(self) -> None:
        self.calls.append("enter")
        if self.deny:
            raise FullscreenDenied("not allowed")
        if self.auto_apply:
            self.host_reports(True)

    def request_exit(self) -> None:
        self.calls.append("exit")
        if self.deny:
            raise FullscreenDenied("not allowed")
        if self.auto_apply:
            self.host_reports(False)

    def is_active(self) -> bool:
        return self.active

    def host_reports(self, active: bool) -> None:
        self.active = active
        self._notify(active)


@pytest.fixture
def fake_fullscreen() -> FakeFullscreen:
    """Inactive fullscreen capability that answers only when told to."""
    return FakeFullscreen()


@pytest.fixture
def retro_runner() -> GameRecord:
    return GameRecord(
        id="1",
        title="Retro Runner",
        description="Pixel platformer",
        thumbnail="https://example.com/retro.png",
        url="https://example.com/retro/",
    )


@pytest.fixture
def sky_duel() -> GameRecord:
    return GameRecord(
        id="2",
        title="Sky Duel",
        description="Arcade dogfight",
        thumbnail="https://example.com/sky.png",
        url="https://example.com/sky/",
    )


@pytest.fixture
def sample_games(retro_runner, sky_duel) -> list[GameRecord]:
    """The two-game catalog used by the acceptance scenarios."""
    return [retro_runner, sky_duel]


@pytest.fixture
def larger_catalog(sample_games) -> list[GameRecord]:
    """Sample catalog plus a few games with overlapping words."""
    return sample_games + [
        GameRecord(id="3", title="Sky Runner", description="Endless runner in the clouds"),
        GameRecord(id="4", title="Chess", description=""),
        GameRecord(id="5", title="Duel Masters", description="Card battles"),
    ]


@pytest.fixture
def recorder() -> Callable:
    """Returns a callable that remembers every argument it is called with."""

    class Recorder(list):
        def __call__(self, value):
            self.append(value)

    return Recorder()
