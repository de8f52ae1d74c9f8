# tests/unit/test_core/test_catalog.py

"""Tests for CatalogStore and the JSON dataset loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gamehub.core.catalog import CatalogStore, load_catalog_file
from gamehub.core.exceptions import DataFormatError

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def raw_entries() -> list[dict]:
    return [
        {"id": 1, "title": "Retro Runner", "description": "Pixel platformer", "url": "https://e.com/1"},
        {"id": 2, "title": "Sky Duel", "description": "Arcade dogfight", "url": "https://e.com/2"},
        {"id": 3, "title": "Chess", "url": "https://e.com/3"},
    ]


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CatalogStore.load
# ---------------------------------------------------------------------------


class TestCatalogStoreLoad:
    """Tests for loading raw entries into the store."""

    def test_load_preserves_order(self, raw_entries):
        store = CatalogStore()
        games = store.load(raw_entries)
        assert [g.id for g in games] == ["1", "2", "3"]
        assert store.games == games
        assert len(store) == 3
        assert store.errors == []

    def test_malformed_entry_is_skipped(self, raw_entries):
        raw_entries.insert(1, {"id": 9, "description": "no title"})
        store = CatalogStore()
        games = store.load(raw_entries)

        assert [g.id for g in games] == ["1", "2", "3"]
        assert len(store.errors) == 1
        assert store.errors[0].index == 1

    def test_duplicate_id_keeps_first(self, raw_entries):
        raw_entries.append({"id": "2", "title": "Impostor", "url": "https://e.com/x"})
        store = CatalogStore()
        store.load(raw_entries)

        assert len(store) == 3
        assert [g.title for g in store.games] == ["Retro Runner", "Sky Duel", "Chess"]
        assert "duplicate id '2'" in str(store.errors[0])

    def test_all_entries_bad_gives_empty_catalog(self):
        store = CatalogStore()
        games = store.load([None, 42, {"id": "x"}])
        assert games == ()
        assert len(store.errors) == 3

    def test_skips_are_logged(self, caplog):
        with caplog.at_level("WARNING", logger="gamehub.catalog"):
            CatalogStore().load([{"id": "1"}])
        assert any("entry #0" in record.getMessage() for record in caplog.records)

    def test_second_load_rejected(self, raw_entries):
        store = CatalogStore()
        store.load(raw_entries)
        with pytest.raises(DataFormatError, match="already loaded"):
            store.load(raw_entries)

    def test_string_source_rejected(self):
        with pytest.raises(DataFormatError, match="list of entries"):
            CatalogStore().load("not a list")

    def test_accepts_generator(self, raw_entries):
        games = CatalogStore().load(entry for entry in raw_entries)
        assert len(games) == 3


class TestCatalogStoreQueries:
    """Tests for the read-only accessors."""

    def test_games_are_immutable(self, raw_entries):
        store = CatalogStore()
        store.load(raw_entries)
        assert isinstance(store.games, tuple)

    def test_iteration(self, raw_entries):
        store = CatalogStore()
        store.load(raw_entries)
        assert [g.title for g in store] == ["Retro Runner", "Sky Duel", "Chess"]


# ---------------------------------------------------------------------------
# load_catalog_file
# ---------------------------------------------------------------------------


class TestLoadCatalogFile:
    """Tests for the JSON file loader."""

    def test_top_level_list(self, tmp_path, raw_entries):
        store = load_catalog_file(_write(tmp_path / "games.json", raw_entries))
        assert len(store) == 3

    def test_games_key(self, tmp_path, raw_entries):
        store = load_catalog_file(_write(tmp_path / "games.json", {"version": 2, "games": raw_entries}))
        assert len(store) == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataFormatError, match="cannot read"):
            load_catalog_file(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "games.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(DataFormatError, match="not valid JSON"):
            load_catalog_file(path)

    def test_wrong_shape(self, tmp_path):
        with pytest.raises(DataFormatError, match="list of games"):
            load_catalog_file(_write(tmp_path / "games.json", {"title": "x"}))

    def test_bundled_catalog_is_valid(self):
        from gamehub.utils.paths import get_resources_dir

        store = load_catalog_file(get_resources_dir() / "games.json")
        assert len(store) > 0
        assert store.errors == []
