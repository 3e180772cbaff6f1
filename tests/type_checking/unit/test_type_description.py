"""Type description tests."""

from __future__ import annotations

import pytest
from container_typecheck.type_checking.type_description import describe_type


class User:
    pass


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (42, "int"),
        (True, "bool"),
        (1.5, "float"),
        ("x", "string"),
        (None, "NULL"),
        (User(), "User"),
        (b"raw", "bytes"),
    ],
)
def test_describes_scalars_and_objects(value: object, expected: str) -> None:
    assert describe_type(value) == expected


def test_describes_flat_arrays() -> None:
    assert describe_type([1, 2, 3]) == "array<int>"
    assert describe_type(["a", "b"]) == "array<string>"
    assert describe_type([User(), User()]) == "array<User>"


def test_describes_mixed_array_in_first_seen_order() -> None:
    assert describe_type([1, "x"]) == "array<int|string>"
    assert describe_type(["x", 1, "y", 2]) == "array<string|int>"


def test_describes_empty_and_nested_containers() -> None:
    assert describe_type([]) == "array<>"
    assert describe_type({}) == "array<>"
    assert describe_type([[1, 2], [3], ["x"]]) == "array<array<int>|array<string>>"


def test_describes_mapping_values() -> None:
    assert describe_type({"a": 1, "b": None, "c": 2}) == "array<int|NULL>"


def test_description_is_deterministic() -> None:
    value = {"items": [1, 2.0, True], "meta": {"id": "x"}}

    assert describe_type(value) == describe_type(value)
    assert describe_type(value) == "array<array<int|float|bool>|array<string>>"
