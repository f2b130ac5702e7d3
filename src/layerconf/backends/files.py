"""YAML/JSON defaults file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from layerconf.errors import ConfigFileError

__all__ = ["DEFAULT_EXTENSIONS", "YamlFileLoader"]

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".yaml", ".yml", ".json")


class YamlFileLoader:
    """Load defaults files written in YAML (JSON is a subset and works too).

    A base path such as ``/etc/app/mail`` is resolved against ``extensions``
    in order; the first existing file wins.
    """

    def __init__(self, extensions: tuple[str, ...] = DEFAULT_EXTENSIONS) -> None:
        if not extensions:
            raise ValueError("At least one file extension is required")
        self._extensions = tuple(extensions)

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def resolve(self, path: str) -> Path | None:
        """Return the file backing ``path``, or None if no extension matches."""
        for ext in self._extensions:
            candidate = Path(path + ext)
            if candidate.is_file():
                return candidate
        return None

    def file_exists(self, path: str) -> bool:
        return self.resolve(path) is not None

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def load_structured(self, path: str) -> Any:
        """Parse the file backing ``path``.

        An empty file loads as ``{}``.

        Raises:
            ConfigFileError: If no file exists, it cannot be read, or it is
                not valid YAML.
        """
        file_path = self.resolve(path)
        if file_path is None:
            raise ConfigFileError(file_path=path, reason="No file with a supported extension")

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigFileError(file_path=str(file_path), reason=str(e), cause=e) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigFileError(
                file_path=str(file_path), reason=f"YAML parse error: {e}", cause=e
            ) from e

        logger.debug("Loaded defaults file %s", file_path)
        return {} if data is None else data
