"""Tests for the ViewState snapshot."""

import dataclasses

import pytest

from gamehub.core.view_state import Screen, ViewState


def test_default_snapshot_is_browsing():
    state = ViewState()
    assert state.screen is Screen.BROWSING
    assert state.is_playing is False
    assert state.has_results is False


def test_playing_requires_selected_game():
    with pytest.raises(ValueError):
        ViewState(screen=Screen.PLAYING)


def test_browsing_rejects_selected_game(retro_runner):
    with pytest.raises(ValueError):
        ViewState(screen=Screen.BROWSING, selected_game=retro_runner)


def test_snapshot_is_frozen(retro_runner):
    state = ViewState(screen=Screen.PLAYING, selected_game=retro_runner)
    assert state.is_playing is True
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.query = "changed"


def test_equal_snapshots_compare_equal(sample_games):
    assert ViewState(visible_games=tuple(sample_games)) == ViewState(visible_games=tuple(sample_games))
