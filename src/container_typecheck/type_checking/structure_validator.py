"""Schema-driven validation of keyed container data."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .check_errors import ExpectedArrayError, MissingKeyError, NestingTooDeepError
from .container_paths import is_container, is_missing, join_path, lookup_key, split_optional_key
from .element_matcher import assert_elements_of_type, check_elements_of_type
from .type_description import describe_type
from .type_registry import EMPTY_REGISTRY, TypeRegistry

_LOGGER = logging.getLogger(__name__)

DEFAULT_OPTIONAL_MARKER = "?"

Schema = Mapping[str, Any]


def assert_structure(
    data: Any,
    schema: Schema,
    base_path: str = "",
    *,
    registry: TypeRegistry | None = None,
    optional_marker: str = DEFAULT_OPTIONAL_MARKER,
    max_depth: int | None = None,
) -> None:
    """Assert that ``data`` satisfies ``schema``.

    Schema values are type tokens or nested schemas. Keys ending with
    ``optional_marker`` may be absent. Fields are checked in schema order and
    the first failure is raised.

    Raises:
      MissingKeyError: A required key is absent.
      ExpectedArrayError: A nested schema met a non-container value.
      TypeMismatchError: A leaf value does not match its type token.
      UnknownTypeTokenError: A schema leaf names an unknown type.
      NestingTooDeepError: Nested schemas go deeper than ``max_depth``.
    """
    if not is_container(data):
        raise _expected_array(base_path, data)
    _assert_fields(
        data,
        schema,
        base_path,
        registry or EMPTY_REGISTRY,
        optional_marker,
        max_depth,
        depth=0,
    )


def check_structure(
    data: Any,
    schema: Schema,
    base_path: str = "",
    *,
    registry: TypeRegistry | None = None,
    optional_marker: str = DEFAULT_OPTIONAL_MARKER,
    max_depth: int | None = None,
) -> bool:
    """Return True when ``data`` satisfies ``schema``; never raises."""
    if not is_container(data):
        return False
    return _check_fields(
        data,
        schema,
        base_path,
        registry or EMPTY_REGISTRY,
        optional_marker,
        max_depth,
        depth=0,
    )


def _assert_fields(
    data: Any,
    schema: Schema,
    base_path: str,
    registry: TypeRegistry,
    optional_marker: str,
    max_depth: int | None,
    depth: int,
) -> None:
    for field_key, expected_spec in schema.items():
        actual_key, optional = split_optional_key(field_key, optional_marker)
        current_path = join_path(base_path, actual_key)

        value = lookup_key(data, actual_key)
        if is_missing(value):
            if optional:
                continue
            _LOGGER.debug("Missing required key %s", current_path)
            raise MissingKeyError(
                f"Missing required key: {current_path}",
                current_path,
                _stringify_spec(expected_spec),
                "missing",
            )

        if isinstance(expected_spec, Mapping):
            if not is_container(value):
                raise _expected_array(current_path, value)
            if max_depth is not None and depth >= max_depth:
                raise NestingTooDeepError(
                    f"Nesting depth exceeds {max_depth} at [{current_path}]",
                    current_path,
                    "array",
                    describe_type(value),
                )
            _assert_fields(
                value,
                expected_spec,
                current_path,
                registry,
                optional_marker,
                max_depth,
                depth + 1,
            )
            continue

        assert_elements_of_type({current_path: value}, expected_spec, registry=registry)


def _check_fields(
    data: Any,
    schema: Schema,
    base_path: str,
    registry: TypeRegistry,
    optional_marker: str,
    max_depth: int | None,
    depth: int,
) -> bool:
    for field_key, expected_spec in schema.items():
        actual_key, optional = split_optional_key(field_key, optional_marker)
        current_path = join_path(base_path, actual_key)

        value = lookup_key(data, actual_key)
        if is_missing(value):
            if optional:
                continue
            return False

        if isinstance(expected_spec, Mapping):
            if not is_container(value):
                return False
            if max_depth is not None and depth >= max_depth:
                return False
            if not _check_fields(
                value,
                expected_spec,
                current_path,
                registry,
                optional_marker,
                max_depth,
                depth + 1,
            ):
                return False
            continue

        if not check_elements_of_type({current_path: value}, expected_spec, registry=registry):
            return False
    return True


def _expected_array(path: str, value: object) -> ExpectedArrayError:
    _LOGGER.debug("Expected array at %r", path)
    return ExpectedArrayError(
        f"Expected array at {path or 'root'}",
        path,
        "array",
        describe_type(value),
    )


def _stringify_spec(expected_spec: object) -> str:
    if isinstance(expected_spec, Mapping):
        return "array"
    if isinstance(expected_spec, type):
        return expected_spec.__name__
    return str(expected_spec).strip()
