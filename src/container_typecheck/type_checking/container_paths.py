"""Container classification, path rendering and key lookup helpers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

_MISSING = object()


def is_container(value: object) -> bool:
    """Return True for lists, tuples, mappings and other non-text sequences."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def iter_entries(container: Any) -> Iterator[tuple[object, Any]]:
    """Yield ``(key, value)`` pairs in the container's iteration order."""
    if isinstance(container, Mapping):
        yield from container.items()
        return
    yield from enumerate(container)


def iter_members(container: Any) -> Iterator[Any]:
    if isinstance(container, Mapping):
        yield from container.values()
        return
    yield from container


def join_path(base_path: str, key: object) -> str:
    """Append one key segment, rendering ``base[key]`` below the root."""
    if base_path == "":
        return str(key)
    return f"{base_path}[{key}]"


def lookup_key(data: Any, key: object) -> Any:
    """Return the value stored under ``key`` or the module sentinel when absent.

    Sequences are addressed with integer or decimal string keys.
    """
    if isinstance(data, Mapping):
        return data[key] if key in data else _MISSING
    if isinstance(key, str) and key.isdecimal():
        index = int(key)
    elif isinstance(key, int) and not isinstance(key, bool) and key >= 0:
        index = key
    else:
        return _MISSING
    if index < len(data):
        return data[index]
    return _MISSING


def is_missing(value: object) -> bool:
    return value is _MISSING


def split_optional_key(field_key: object, optional_marker: str) -> tuple[object, bool]:
    """Strip trailing optional markers and report whether any were present.

    Only string keys can carry the marker.
    """
    if not isinstance(field_key, str):
        return field_key, False
    if not optional_marker or not field_key.endswith(optional_marker):
        return field_key, False
    actual_key = field_key
    while actual_key.endswith(optional_marker):
        actual_key = actual_key[: -len(optional_marker)]
    return actual_key, True
