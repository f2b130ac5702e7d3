"""Dotted path parsing: splitting, segment keys, and namespace prefixes."""

from __future__ import annotations

import re
from collections.abc import Iterable

__all__ = [
    "DEFAULT_DELIMITER",
    "Key",
    "join_path",
    "namespaced",
    "normalize_namespace",
    "normalize_path",
    "segment_to_key",
    "split_path",
]

DEFAULT_DELIMITER = "."

Key = str | int

_patterns: dict[str, re.Pattern[str]] = {}


def _delimiter_pattern(delimiter: str) -> re.Pattern[str]:
    pattern = _patterns.get(delimiter)
    if pattern is None:
        pattern = re.compile(r"\s?" + re.escape(delimiter) + r"\s?")
        _patterns[delimiter] = pattern
    return pattern


def normalize_path(path: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Collapse one whitespace character on either side of each delimiter.

    ``"a . b.c"`` becomes ``"a.b.c"``.
    """
    return _delimiter_pattern(delimiter).sub(lambda _m: delimiter, path)


def segment_to_key(segment: str) -> Key:
    """Convert a path segment into a tree key.

    Segments made only of ASCII digits become ``int`` keys so that numeric
    keys and list indices are interchangeable. Anything else, including the
    empty string, stays a ``str``.
    """
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return segment


def split_path(path: str, delimiter: str = DEFAULT_DELIMITER) -> list[Key]:
    """Split a delimited path into its ordered keys.

    Empty segments are kept; they never match a stored key.

    Args:
        path: Delimited path such as ``"plugins.0.name"``.
        delimiter: Separator between segments.

    Returns:
        The keys in order, with all-digit segments converted to ``int``.
    """
    return [segment_to_key(part) for part in normalize_path(path, delimiter).split(delimiter)]


def join_path(segments: Iterable[Key], delimiter: str = DEFAULT_DELIMITER) -> str:
    """Join keys back into a delimited path.

    Integer keys are written in canonical form, so a segment such as ``"007"``
    comes back as ``"7"``; otherwise this undoes :func:`split_path` on a
    normalized path.
    """
    return delimiter.join(str(segment) for segment in segments)


def namespaced(namespace: str, first_segment: Key) -> str:
    """Build the store key for a top-level segment."""
    return f"{namespace}{first_segment}"


def normalize_namespace(namespace: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Return ``namespace`` ending in exactly one delimiter.

    Any trailing run of delimiter or space characters is stripped before the
    single delimiter is appended, so ``"plugin"``, ``"plugin."`` and
    ``"plugin . "`` all normalize to ``"plugin."``.
    """
    return namespace.rstrip(delimiter + " ") + delimiter
