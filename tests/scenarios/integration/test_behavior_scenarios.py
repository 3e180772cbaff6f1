"""End-to-end behaviour scenarios against the public package API."""

from __future__ import annotations

import pytest
from container_typecheck import (
    MappingTypeRegistry,
    MissingKeyError,
    TypeMismatchError,
    assert_elements_of_type,
    assert_structure,
    check_elements_of_type,
    check_structure,
    describe_type,
)


class User:
    pass


def test_flat_string_array_passes() -> None:
    assert_elements_of_type(["a", "b"], "string")


def test_object_array_passes_with_registered_class() -> None:
    registry = MappingTypeRegistry.from_classes(User)

    assert_elements_of_type([User(), User()], "User", registry=registry)
    assert describe_type([User(), User()]) == "array<User>"


def test_recursive_int_array_passes() -> None:
    assert_elements_of_type([[1, 2], [3, 4]], "int", recursive=True)


def test_structure_with_omitted_optional_field_passes() -> None:
    assert_structure({"email": "a@example.com"}, {"email": "string", "phone?": "string"})


def test_structure_missing_required_key_fails() -> None:
    with pytest.raises(MissingKeyError) as exc_info:
        assert_structure({"name": "Alice"}, {"name": "string", "age": "int"})

    assert exc_info.value.path == "age"


def test_wrong_type_in_array_fails() -> None:
    with pytest.raises(TypeMismatchError) as exc_info:
        assert_elements_of_type([1, "fail", 3], "int")

    assert (exc_info.value.path, exc_info.value.expected, exc_info.value.actual) == (
        "1",
        "int",
        "string",
    )


def test_describe_types() -> None:
    assert describe_type(42) == "int"
    assert describe_type(["a", "b"]) == "array<string>"
    assert describe_type([1, "x"]) == "array<int|string>"


def test_boolean_variants() -> None:
    schema = {"name": "string", "age": "int"}

    assert check_elements_of_type([1, 2, 3], "int") is True
    assert check_elements_of_type([1, "fail"], "int") is False
    assert check_structure({"name": "Alice", "age": 30}, schema) is True
    assert check_structure({"name": "Alice"}, schema) is False
