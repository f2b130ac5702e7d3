"""layerconf - Delimited-path configuration over file defaults and a persisted store."""

from __future__ import annotations

# Core
from layerconf.config import LayeredConfig
from layerconf.options import ConfigOptions

# Paths and trees
from layerconf.path import (
    DEFAULT_DELIMITER,
    join_path,
    namespaced,
    normalize_namespace,
    normalize_path,
    segment_to_key,
    split_path,
)
from layerconf.tree import get_path, has_path, set_path, unset_path

# Backends
from layerconf.backends import FileLoader, KeyValueStore, MemoryStore, SqliteStore, YamlFileLoader

# Serialization
from layerconf.serialization import deserialize, serialize

# Errors
from layerconf.errors import (
    ConfigError,
    ConfigFileError,
    ConfigNotFoundError,
    ErrorCodes,
    LayerConfError,
    StoreValueError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "LayeredConfig",
    "ConfigOptions",
    # Paths and trees
    "DEFAULT_DELIMITER",
    "split_path",
    "join_path",
    "normalize_path",
    "segment_to_key",
    "namespaced",
    "normalize_namespace",
    "get_path",
    "has_path",
    "set_path",
    "unset_path",
    # Backends
    "KeyValueStore",
    "FileLoader",
    "MemoryStore",
    "SqliteStore",
    "YamlFileLoader",
    # Serialization
    "serialize",
    "deserialize",
    # Errors
    "ErrorCodes",
    "LayerConfError",
    "ConfigNotFoundError",
    "ConfigError",
    "ConfigFileError",
    "StoreValueError",
]
