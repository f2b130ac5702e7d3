"""Tests for the SQLite-backed key-value store."""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from layerconf.backends.base import KeyValueStore
from layerconf.backends.sqlite import SqliteStore
from layerconf.config import LayeredConfig


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "state" / "options.db"


class TestSqliteStore:
    def test_satisfies_protocol(self, db_path: Path) -> None:
        assert isinstance(SqliteStore(db_path), KeyValueStore)

    def test_creates_parent_directory_and_table(self, db_path: Path) -> None:
        SqliteStore(db_path)
        assert db_path.exists()
        conn = sqlite3.connect(db_path)
        try:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
        finally:
            conn.close()
        assert "options" in tables

    def test_read_missing_returns_none(self, db_path: Path) -> None:
        assert SqliteStore(db_path).read("absent") is None

    def test_write_upserts(self, db_path: Path) -> None:
        store = SqliteStore(db_path)
        store.write("plugin.opts", "first")
        store.write("plugin.opts", "second")
        assert store.read("plugin.opts") == "second"

    def test_values_persist_across_instances(self, db_path: Path) -> None:
        SqliteStore(db_path).write("k", "v")
        assert SqliteStore(db_path).read("k") == "v"

    def test_delete(self, db_path: Path) -> None:
        store = SqliteStore(db_path)
        store.write("k", "v")
        store.delete("k")
        assert store.read("k") is None

    def test_custom_table(self, db_path: Path) -> None:
        store = SqliteStore(db_path, table="wp_options")
        store.write("k", "v")
        assert store.read("k") == "v"
        assert SqliteStore(db_path).read("k") is None

    def test_invalid_table_name_rejected(self, db_path: Path) -> None:
        with pytest.raises(ValueError):
            SqliteStore(db_path, table="options; DROP TABLE x")


class TestSqliteStoreWithConfig:
    def test_config_round_trips_through_database(self, db_path: Path, empty_dir: Path) -> None:
        with LayeredConfig(empty_dir, namespace="plugin", store=SqliteStore(db_path)) as config:
            config.set("opts.color", "red")
            config.set("opts.sizes", [10, 20])

        reopened = LayeredConfig(empty_dir, namespace="plugin", store=SqliteStore(db_path))
        assert reopened.get("opts.color") == "red"
        assert reopened.get("opts.sizes.1") == 20
