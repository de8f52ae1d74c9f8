"""Tests for Config: settings file and environment overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gamehub.config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("GAMEHUB_CATALOG", "GAMEHUB_LOG_LEVEL", "GAMEHUB_FULLSCREEN"):
        monkeypatch.delenv(name, raising=False)
    # keep load_dotenv away from a developer's .env
    monkeypatch.chdir(tmp_path)


def _config(tmp_path: Path) -> Config:
    return Config(DATA_DIR=tmp_path, SETTINGS_FILE=tmp_path / "settings.json")


def test_defaults_without_settings(tmp_path):
    cfg = _config(tmp_path)
    assert cfg.UI_LANGUAGE == "en"
    assert cfg.START_FULLSCREEN is False
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.CATALOG_FILE.name == "games.json"


def test_settings_file_read(tmp_path):
    (tmp_path / "settings.json").write_text(
        json.dumps(
            {
                "ui_language": "de",
                "start_fullscreen": True,
                "log_level": "DEBUG",
                "catalog_file": "/srv/games.json",
            }
        ),
        encoding="utf-8",
    )
    cfg = _config(tmp_path)
    assert cfg.UI_LANGUAGE == "de"
    assert cfg.START_FULLSCREEN is True
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.CATALOG_FILE == Path("/srv/games.json")


def test_broken_settings_file_ignored(tmp_path):
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    assert _config(tmp_path).UI_LANGUAGE == "en"


def test_environment_wins(tmp_path, monkeypatch):
    (tmp_path / "settings.json").write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    monkeypatch.setenv("GAMEHUB_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("GAMEHUB_CATALOG", "/tmp/other.json")
    monkeypatch.setenv("GAMEHUB_FULLSCREEN", "yes")

    cfg = _config(tmp_path)
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.CATALOG_FILE == Path("/tmp/other.json")
    assert cfg.START_FULLSCREEN is True


def test_save_round_trip(tmp_path):
    cfg = _config(tmp_path)
    cfg.UI_LANGUAGE = "de"
    cfg.START_FULLSCREEN = True
    cfg.save()

    reloaded = _config(tmp_path)
    assert reloaded.UI_LANGUAGE == "de"
    assert reloaded.START_FULLSCREEN is True


@pytest.mark.parametrize(
    "settings",
    [
        {"thumbnail_timeout": "fast"},
        {"thumbnail_timeout": None},
        {"thumbnail_timeout": -1},
        {"thumbnail_timeout": True},
        {"ui_language": None},
        {"log_level": None},
        {"start_fullscreen": "yes"},
        {"catalog_file": 42},
        {"log_file": ["a"]},
    ],
)
def test_wrongly_typed_setting_keeps_default(tmp_path, caplog, settings):
    (tmp_path / "settings.json").write_text(json.dumps(settings), encoding="utf-8")

    with caplog.at_level("ERROR", logger="gamehub.config"):
        cfg = _config(tmp_path)

    assert cfg.THUMBNAIL_TIMEOUT == 10.0
    assert cfg.UI_LANGUAGE == "en"
    assert cfg.LOG_LEVEL == "INFO"
    assert cfg.START_FULLSCREEN is False
    assert cfg.CATALOG_FILE.name == "games.json"
    assert cfg.LOG_FILE is None
    assert caplog.records


def test_bad_setting_does_not_discard_good_ones(tmp_path):
    (tmp_path / "settings.json").write_text(
        json.dumps({"thumbnail_timeout": "fast", "ui_language": "de", "log_level": "DEBUG"}),
        encoding="utf-8",
    )
    cfg = _config(tmp_path)
    assert cfg.THUMBNAIL_TIMEOUT == 10.0
    assert cfg.UI_LANGUAGE == "de"
    assert cfg.LOG_LEVEL == "DEBUG"


def test_numeric_timeout_accepted(tmp_path):
    (tmp_path / "settings.json").write_text(json.dumps({"thumbnail_timeout": 3}), encoding="utf-8")
    assert _config(tmp_path).THUMBNAIL_TIMEOUT == 3.0
