"""In-memory key-value store."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

__all__ = ["MemoryStore"]


class MemoryStore:
    """Dict-backed :class:`~layerconf.backends.base.KeyValueStore`.

    Useful for embedding and tests; contents are lost with the instance.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self._values.get(key)

    def write(self, key: str, raw: str) -> None:
        self._values[key] = raw

    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""
        self._values.pop(key, None)

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
