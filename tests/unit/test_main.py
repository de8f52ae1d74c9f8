"""Tests for catalog loading at startup."""

from __future__ import annotations

import json

from gamehub.main import load_catalog


def test_missing_file_gives_empty_catalog(tmp_path, caplog):
    with caplog.at_level("ERROR", logger="gamehub"):
        games = load_catalog(tmp_path / "missing.json")
    assert games == ()
    assert caplog.records


def test_not_a_list_gives_empty_catalog(tmp_path):
    path = tmp_path / "games.json"
    path.write_text(json.dumps({"title": "nope"}), encoding="utf-8")
    assert load_catalog(path) == ()


def test_partial_catalog_is_kept(tmp_path, caplog):
    path = tmp_path / "games.json"
    path.write_text(
        json.dumps(
            [
                {"id": 1, "title": "Retro Runner", "url": "https://example.com/rr/"},
                {"id": 2, "url": "https://example.com/no-title/"},
            ]
        ),
        encoding="utf-8",
    )
    with caplog.at_level("WARNING", logger="gamehub"):
        games = load_catalog(path)

    assert [g.title for g in games] == ["Retro Runner"]
    assert any(r.levelname == "WARNING" for r in caplog.records)


def test_bundled_catalog_loads():
    from gamehub.config import Config

    games = load_catalog(Config.CATALOG_FILE)
    assert len(games) == 8
    assert len({g.id for g in games}) == 8
