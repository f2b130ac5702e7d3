"""Key-value stores and file loaders for layerconf."""

from __future__ import annotations

from layerconf.backends.base import FileLoader, KeyValueStore
from layerconf.backends.files import DEFAULT_EXTENSIONS, YamlFileLoader
from layerconf.backends.memory import MemoryStore
from layerconf.backends.sqlite import SqliteStore

__all__ = [
    "DEFAULT_EXTENSIONS",
    "FileLoader",
    "KeyValueStore",
    "MemoryStore",
    "SqliteStore",
    "YamlFileLoader",
]
