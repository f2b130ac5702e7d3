"""Path-addressed access to nested dict/list trees.

These functions hold the walk semantics used by
:class:`layerconf.config.LayeredConfig` and work on any plain nested
structure. Containers are ``dict`` and ``list``; everything else is a leaf.
Integer keys index lists, and an ``int`` key also finds a ``str`` key of the
same digits in a dict, so ``"0"`` and ``0`` address the same entry.
"""

from __future__ import annotations

from typing import Any

from layerconf.path import DEFAULT_DELIMITER, Key, split_path

__all__ = ["get_path", "has_path", "is_container", "set_path", "store_key", "unset_path"]

_MISSING = object()


def is_container(value: Any) -> bool:
    """Return True if ``value`` can be descended into."""
    return isinstance(value, (dict, list))


def _existing_key(container: dict[Key, Any], key: Key) -> Key | None:
    if key in container:
        return key
    if isinstance(key, int) and str(key) in container:
        return str(key)
    return None


def _lookup(container: Any, key: Key) -> Any:
    if isinstance(container, list):
        if isinstance(key, int) and key < len(container):
            return container[key]
        return _MISSING
    found = _existing_key(container, key)
    if found is None:
        return _MISSING
    return container[found]


def store_key(container: Any, key: Key, value: Any) -> None:
    """Assign ``value`` under ``key`` in a single container, reusing a matching digit-string key."""
    if isinstance(container, list):
        # Writing past the end pads the gap, like a sparse array.
        if key >= len(container):
            container.extend([None] * (key - len(container) + 1))
        container[key] = value
        return
    found = _existing_key(container, key)
    container[key if found is None else found] = value


def _writable(container: Any, key: Key, parent: Any, parent_key: Key | None) -> Any:
    """Return a container that accepts ``key``, converting a list to a dict if needed."""
    if isinstance(container, list) and not isinstance(key, int):
        mapping: dict[Key, Any] = dict(enumerate(container))
        store_key(parent, parent_key, mapping)
        return mapping
    return container


def get_path(
    data: dict[Key, Any],
    path: str,
    default: Any = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> Any:
    """Resolve ``path`` in ``data``.

    A top-level key equal to the whole, unsplit ``path`` wins over the
    segment walk, so flat keys containing the delimiter stay reachable.

    Args:
        data: The root mapping.
        path: Delimited path such as ``"db.replicas.0.host"``.
        default: Returned when any segment is missing or a leaf blocks the walk.
        delimiter: Path separator.

    Returns:
        The stored value, or ``default``.
    """
    if path in data:
        return data[path]

    keys = split_path(path, delimiter)
    current: Any = data
    last = len(keys) - 1
    for index, key in enumerate(keys):
        child = _lookup(current, key)
        if child is _MISSING:
            return default
        if index == last:
            return child
        if not is_container(child):
            return default
        current = child
    return default


def has_path(data: dict[Key, Any], path: str, delimiter: str = DEFAULT_DELIMITER) -> bool:
    """Return True if ``path`` resolves to a stored value, including ``None``."""
    return get_path(data, path, _MISSING, delimiter) is not _MISSING


def set_path(
    data: dict[Key, Any],
    path: str,
    value: Any,
    delimiter: str = DEFAULT_DELIMITER,
) -> None:
    """Assign ``value`` at ``path``, creating intermediate dicts as needed.

    A leaf sitting where an intermediate container is required is replaced by
    a new dict.
    """
    keys = split_path(path, delimiter)
    parent: Any = None
    parent_key: Key | None = None
    current: Any = data
    for key in keys[:-1]:
        current = _writable(current, key, parent, parent_key)
        child = _lookup(current, key)
        if child is _MISSING or not is_container(child):
            child = {}
            store_key(current, key, child)
        parent, parent_key, current = current, key, child

    current = _writable(current, keys[-1], parent, parent_key)
    store_key(current, keys[-1], value)


def unset_path(data: dict[Key, Any], path: str, delimiter: str = DEFAULT_DELIMITER) -> None:
    """Remove the value at ``path``.

    Nothing is created on the way down. If an intermediate is missing or is
    not a container, this is a no-op.
    """
    keys = split_path(path, delimiter)
    current: Any = data
    for key in keys[:-1]:
        child = _lookup(current, key)
        if child is _MISSING or not is_container(child):
            return
        current = child

    key = keys[-1]
    if isinstance(current, list):
        if isinstance(key, int) and key < len(current):
            del current[key]
        return
    found = _existing_key(current, key)
    if found is not None:
        del current[found]
