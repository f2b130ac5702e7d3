"""Collaborator protocols consumed by LayeredConfig."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["FileLoader", "KeyValueStore"]


@runtime_checkable
class KeyValueStore(Protocol):
    """Persistent string store addressed by opaque keys.

    Values are serialized by the caller; the store never interprets them.
    """

    def read(self, key: str) -> str | None:
        """Return the raw value for ``key``, or None when it is absent."""
        ...

    def write(self, key: str, raw: str) -> None:
        """Create or replace the raw value for ``key``."""
        ...


@runtime_checkable
class FileLoader(Protocol):
    """Locates and parses defaults files.

    ``file_exists`` and ``load_structured`` receive a path without an
    extension; resolving the format is the loader's job.
    """

    def file_exists(self, path: str) -> bool:
        """Return True if a defaults file backs the extensionless ``path``."""
        ...

    def is_directory(self, path: str) -> bool:
        """Return True if ``path`` is a directory to descend into."""
        ...

    def load_structured(self, path: str) -> Any:
        """Return the parsed content as a native nested value."""
        ...
