"""Layered configuration: file defaults overlaid by a persisted key-value store."""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

from layerconf.backends.base import FileLoader, KeyValueStore
from layerconf.backends.files import YamlFileLoader
from layerconf.backends.memory import MemoryStore
from layerconf.errors import ConfigError, ConfigFileError, ConfigNotFoundError
from layerconf.options import ConfigOptions
from layerconf.path import DEFAULT_DELIMITER, Key, namespaced, normalize_namespace, split_path
from layerconf.serialization import deserialize, serialize
from layerconf.tree import get_path, has_path, set_path, store_key, unset_path

__all__ = ["LayeredConfig"]

logger = logging.getLogger(__name__)

_MISSING = object()


def _resolve_search_root(path: str | os.PathLike[str]) -> str:
    if not os.fspath(path):
        raise ConfigNotFoundError(config_path="")
    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ConfigNotFoundError(config_path=os.fspath(path), cause=e) from e
    return str(resolved) + os.sep


class LayeredConfig:
    """Configuration accessor with delimited-path keys and lazy layered loading.

    Values come from two layers. Defaults files under ``path`` are found by
    walking a key's segments through the directory tree; a value persisted in
    ``store`` under ``namespace + top_level_key`` then replaces the whole
    top-level entry. Each top-level key is loaded at most once per instance,
    on the first get/set/unset touching it.

    Changes live in memory until :meth:`save` or :meth:`close` writes every
    top-level entry back to the store. ``close()`` must be called by the owner,
    typically through ``with``::

        with LayeredConfig("config/", namespace="mailer", store=store) as config:
            config.set("smtp.port", 2525)

    Not thread-safe.

    Args:
        path: Directory holding defaults files. Must exist.
        namespace: Prefix for store keys. When given, a defaults file named
            after the namespace is loaded as the initial tree.
        delimiter: Path separator, ``"."`` by default.
        store: Override store. Defaults to a fresh :class:`MemoryStore`.
        loader: Defaults file loader. Defaults to :class:`YamlFileLoader`.

    Raises:
        ConfigNotFoundError: If ``path`` is empty or does not exist.
        ConfigError: If ``delimiter`` is empty.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        namespace: str | None = None,
        delimiter: str | None = None,
        *,
        store: KeyValueStore | None = None,
        loader: FileLoader | None = None,
    ) -> None:
        if delimiter is None:
            delimiter = DEFAULT_DELIMITER
        if not delimiter:
            raise ConfigError("Delimiter must not be empty")

        self._delimiter = delimiter
        self._file_path = _resolve_search_root(path)
        self._store: KeyValueStore = store if store is not None else MemoryStore()
        self._loader: FileLoader = loader if loader is not None else YamlFileLoader()
        self._data: dict[Key, Any] = {}
        self._loaded: set[str] = set()
        self._namespace = ""
        self._closed = False

        if namespace is not None:
            self.namespace = namespace
            self.load_namespace()

    @classmethod
    def from_options(
        cls,
        options: ConfigOptions,
        *,
        store: KeyValueStore | None = None,
        loader: FileLoader | None = None,
    ) -> LayeredConfig:
        """Build an instance from validated :class:`ConfigOptions`."""
        return cls(
            options.path,
            namespace=options.namespace,
            delimiter=options.delimiter,
            store=store,
            loader=loader,
        )

    # -- Properties --

    @property
    def namespace(self) -> str:
        """Store key prefix, always ending in one delimiter, or ``""`` if unset."""
        return self._namespace

    @namespace.setter
    def namespace(self, value: str) -> None:
        self._namespace = normalize_namespace(value, self._delimiter)

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def file_path(self) -> str:
        """Absolute defaults directory, with a trailing separator."""
        return self._file_path

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def loader(self) -> FileLoader:
        return self._loader

    @property
    def closed(self) -> bool:
        return self._closed

    # -- Loading --

    def is_loaded(self, path: str) -> bool:
        """Return True if the top-level key of ``path`` has been loaded."""
        first = split_path(path, self._delimiter)[0]
        return namespaced(self._namespace, first) in self._loaded

    def load(self, path: str) -> None:
        """Load the top-level entry of ``path`` from files, then the store.

        Does nothing if that entry was loaded before. A stored value replaces
        whatever the defaults files provided for the entry.

        Raises:
            ConfigFileError: If a defaults file cannot be parsed.
            StoreValueError: If the stored value is malformed. The entry stays
                unloaded.
        """
        keys = split_path(path, self._delimiter)
        first = keys[0]
        loaded_key = namespaced(self._namespace, first)
        if loaded_key in self._loaded:
            return

        self._load_files(keys)

        raw = self._store.read(loaded_key)
        if raw:
            store_key(self._data, first, deserialize(raw, key=loaded_key))
            logger.debug("Applied stored value for '%s'", loaded_key)

        self._loaded.add(loaded_key)
        logger.debug("Loaded top-level key '%s'", loaded_key)

    def _load_files(self, keys: list[Key]) -> None:
        """Walk ``keys`` down the defaults directory, loading each file met, until a dead end.

        A loaded file does not extend the directory prefix; the next segment is
        looked up beside it.
        """
        relative = ""
        for segment in keys:
            name = str(segment)
            candidate = f"{self._file_path}{relative}{name}"
            if self._loader.file_exists(candidate):
                # Directory levels become delimiter-joined parts of a flat top-level key.
                tree_key = relative.replace(os.sep, self._delimiter) + name
                self._data[tree_key] = self._loader.load_structured(candidate)
                logger.debug("Loaded defaults for '%s' from %s", tree_key, candidate)
                continue
            if self._loader.is_directory(candidate):
                relative += name + os.sep
                continue
            return

    def load_namespace(self) -> None:
        """Load the defaults file named after the namespace as the initial tree.

        A namespace directory is left to the per-key file walk.

        Raises:
            ConfigFileError: If the namespace file does not hold a mapping.
        """
        name = self._namespace.rstrip(self._delimiter)
        if not name:
            return
        candidate = f"{self._file_path}{name}"
        if not self._loader.file_exists(candidate):
            return

        content = self._loader.load_structured(candidate)
        if not isinstance(content, dict):
            raise ConfigFileError(
                file_path=candidate,
                reason=f"namespace file must hold a mapping, got {type(content).__name__}",
            )
        self._data = content
        logger.debug("Loaded namespace file %s with %d top-level keys", candidate, len(content))

    # -- Path access --

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at ``path``, or ``default`` when it cannot be resolved."""
        self.load(path)
        return get_path(self._data, path, default, self._delimiter)

    def set(self, path: str, value: Any) -> None:
        """Set the value at ``path``, creating intermediate mappings."""
        self.load(path)
        set_path(self._data, path, value, self._delimiter)

    def unset(self, path: str) -> None:
        """Remove the value at ``path``. Missing intermediates make this a no-op."""
        self.load(path)
        unset_path(self._data, path, self._delimiter)

    def exists(self, path: str) -> bool:
        """Return True if ``path`` holds a value, even ``None``."""
        self.load(path)
        return has_path(self._data, path, self._delimiter)

    def to_dict(self) -> dict[Key, Any]:
        """Return a deep copy of everything loaded or set so far."""
        return copy.deepcopy(self._data)

    def __getitem__(self, path: str) -> Any:
        value = self.get(path, _MISSING)
        if value is _MISSING:
            raise KeyError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        self.set(path, value)

    def __delitem__(self, path: str) -> None:
        self.unset(path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.exists(path)

    # -- Persistence and lifecycle --

    def save(self) -> None:
        """Write every top-level entry to the store as ``namespace + key``.

        No rollback: if a write fails, entries written before it stay written.
        """
        count = 0
        for key, value in list(self._data.items()):
            target = namespaced(self._namespace, key)
            self._store.write(target, serialize(value, key=target))
            count += 1
        logger.debug("Saved %d top-level keys (namespace=%r)", count, self._namespace)

    def close(self) -> None:
        """Save once and mark the instance closed. Later calls do nothing.

        Store errors are logged, not raised.
        """
        if self._closed:
            return
        self._closed = True
        try:
            self.save()
        except Exception:
            logger.exception("Failed to save config on close (namespace=%r)", self._namespace)

    def __enter__(self) -> LayeredConfig:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"LayeredConfig(path={self._file_path!r}, namespace={self._namespace!r}, "
            f"delimiter={self._delimiter!r}, loaded={sorted(self._loaded)!r})"
        )
