"""Call-recording collaborators shared across the test suite."""

from __future__ import annotations

from typing import Any

from layerconf.backends.files import YamlFileLoader
from layerconf.backends.memory import MemoryStore


class CountingStore(MemoryStore):
    """MemoryStore that records every read and write."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.reads: list[str] = []
        self.writes: list[tuple[str, str]] = []

    def read(self, key: str) -> str | None:
        self.reads.append(key)
        return super().read(key)

    def write(self, key: str, raw: str) -> None:
        self.writes.append((key, raw))
        super().write(key, raw)


class FailingStore(CountingStore):
    """Store whose writes fail for one key."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def write(self, key: str, raw: str) -> None:
        if key == self.fail_on:
            raise OSError(f"disk full while writing {key}")
        super().write(key, raw)


class CountingLoader(YamlFileLoader):
    """YamlFileLoader that records existence checks and loads."""

    def __init__(self) -> None:
        super().__init__()
        self.exists_calls: list[str] = []
        self.load_calls: list[str] = []

    def file_exists(self, path: str) -> bool:
        self.exists_calls.append(path)
        return super().file_exists(path)

    def load_structured(self, path: str) -> Any:
        self.load_calls.append(path)
        return super().load_structured(path)
