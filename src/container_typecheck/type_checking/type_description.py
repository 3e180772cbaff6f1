"""Structural type descriptions for arbitrary values."""

from __future__ import annotations

from .container_paths import is_container, iter_members

_SCALAR_NAMES: tuple[tuple[type, str], ...] = (
    # bool first, it is a subclass of int
    (bool, "bool"),
    (int, "int"),
    (float, "float"),
    (str, "string"),
)


def describe_type(value: object) -> str:
    """Describe the shape of ``value`` as a type signature.

    Containers render as ``array<T1|T2>`` with member descriptions
    deduplicated in first-seen order, ``array<>`` when empty.

    Examples:
      >>> describe_type([1, "x", 2])
      'array<int|string>'
      >>> describe_type({"a": [1.5], "b": None})
      'array<array<float>|NULL>'
    """
    if is_container(value):
        members = dict.fromkeys(describe_type(member) for member in iter_members(value))
        return f"array<{'|'.join(members)}>"
    if value is None:
        return "NULL"
    for scalar_type, name in _SCALAR_NAMES:
        if isinstance(value, scalar_type):
            return name
    return type(value).__name__
