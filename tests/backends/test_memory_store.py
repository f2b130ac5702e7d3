"""Tests for the in-memory key-value store."""

from __future__ import annotations

from layerconf.backends.base import KeyValueStore
from layerconf.backends.memory import MemoryStore


class TestMemoryStore:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(MemoryStore(), KeyValueStore)

    def test_read_missing_returns_none(self) -> None:
        assert MemoryStore().read("absent") is None

    def test_write_then_read(self) -> None:
        store = MemoryStore()
        store.write("plugin.opts", "color: red\n")
        assert store.read("plugin.opts") == "color: red\n"
        assert "plugin.opts" in store
        assert len(store) == 1

    def test_write_replaces(self) -> None:
        store = MemoryStore({"k": "old"})
        store.write("k", "new")
        assert store.read("k") == "new"

    def test_initial_values_are_copied(self) -> None:
        initial = {"k": "v"}
        store = MemoryStore(initial)
        store.write("other", "x")
        assert initial == {"k": "v"}

    def test_delete_and_keys(self) -> None:
        store = MemoryStore({"a": "1", "b": "2"})
        store.delete("a")
        store.delete("missing")
        assert list(store.keys()) == ["b"]
