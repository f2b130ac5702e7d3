"""Conversion between tree values and the strings kept in a key-value store."""

from __future__ import annotations

from typing import Any

import yaml

from layerconf.errors import StoreValueError

__all__ = ["deserialize", "serialize"]


def serialize(value: Any, key: str | None = None) -> str:
    """Dump a tree value to YAML text.

    YAML keeps integer mapping keys as integers, so numeric segments survive
    a save/load cycle.
    """
    try:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)
    except yaml.YAMLError as e:
        raise StoreValueError(f"Cannot serialize value for '{key}': {e}", key=key, cause=e) from e


def deserialize(raw: str, key: str | None = None) -> Any:
    """Parse YAML text produced by :func:`serialize`."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise StoreValueError(f"Malformed stored value for '{key}': {e}", key=key, cause=e) from e
