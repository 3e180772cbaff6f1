"""Element type matching over flat and nested containers."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .check_errors import (
    ExpectedArrayError,
    NestingTooDeepError,
    TypeMismatchError,
    UnknownTypeTokenError,
)
from .container_paths import is_container, iter_entries, iter_members, join_path
from .type_description import describe_type
from .type_registry import EMPTY_REGISTRY, TypeRegistry
from .type_tokens import ResolvedTypeToken, normalize_type_token, resolve_type_token

_LOGGER = logging.getLogger(__name__)


def assert_elements_of_type(
    collection: Iterable[Any],
    expected_type: str | type,
    recursive: bool = False,
    base_path: str = "",
    *,
    registry: TypeRegistry | None = None,
    max_depth: int | None = None,
) -> None:
    """Assert that every element of ``collection`` matches ``expected_type``.

    Args:
      collection: List, tuple or mapping to validate.
      expected_type: Primitive kind name, registered type name or class.
      recursive: Descend into nested containers instead of matching them.
      base_path: Path prefix used in diagnostics.
      registry: Registry resolving nominal type names.
      max_depth: Maximum nesting depth below ``collection``, unbounded when None.

    Raises:
      UnknownTypeTokenError: If ``expected_type`` cannot be resolved. Raised
        before any element is inspected.
      TypeMismatchError: For the first element, in iteration order, that does
        not match.
      ExpectedArrayError: If ``collection`` itself is not a list, tuple or mapping.
      NestingTooDeepError: If recursion would exceed ``max_depth``.
    """
    resolved = resolve_type_token(expected_type, registry or EMPTY_REGISTRY)
    if resolved is None:
        token = normalize_type_token(expected_type)
        _LOGGER.debug("Unknown type token %r at path %r", token, base_path)
        raise UnknownTypeTokenError(f"Unknown type: {token}", "", token, "unknown")
    if not is_container(collection):
        actual = describe_type(collection)
        _LOGGER.debug("Expected array at %r, got %s", base_path, actual)
        raise ExpectedArrayError(
            f"Expected array at {base_path or 'root'}", base_path, "array", actual
        )
    _assert_entries(collection, resolved, recursive, base_path, max_depth, depth=0)


def check_elements_of_type(
    collection: Iterable[Any],
    expected_type: str | type,
    recursive: bool = False,
    base_path: str = "",
    *,
    registry: TypeRegistry | None = None,
    max_depth: int | None = None,
) -> bool:
    """Return True when every element of ``collection`` matches ``expected_type``.

    Unknown type tokens, non-container input and excessive nesting yield False
    instead of raising. ``base_path`` is accepted for parity with
    ``assert_elements_of_type`` and does not affect the result.
    """
    resolved = resolve_type_token(expected_type, registry or EMPTY_REGISTRY)
    if resolved is None or not is_container(collection):
        return False
    return _check_entries(collection, resolved, recursive, max_depth, depth=0)


def _assert_entries(
    collection: Iterable[Any],
    resolved: ResolvedTypeToken,
    recursive: bool,
    base_path: str,
    max_depth: int | None,
    depth: int,
) -> None:
    for key, value in iter_entries(collection):
        current_path = join_path(base_path, key)

        if recursive and is_container(value):
            if max_depth is not None and depth >= max_depth:
                _LOGGER.debug("Nesting depth %d exceeded at %s", max_depth, current_path)
                raise NestingTooDeepError(
                    f"Nesting depth exceeds {max_depth} at [{current_path}]",
                    current_path,
                    resolved.expected,
                    describe_type(value),
                )
            _assert_entries(value, resolved, True, current_path, max_depth, depth + 1)
            continue

        if not resolved.matches(value):
            actual = describe_type(value)
            _LOGGER.debug(
                "Type mismatch at %s: %s is not %s", current_path, actual, resolved.expected
            )
            raise TypeMismatchError(
                f"Element at [{current_path}] is of type {actual}, expected {resolved.expected}",
                current_path,
                resolved.expected,
                actual,
            )


def _check_entries(
    collection: Iterable[Any],
    resolved: ResolvedTypeToken,
    recursive: bool,
    max_depth: int | None,
    depth: int,
) -> bool:
    for value in iter_members(collection):
        if recursive and is_container(value):
            if max_depth is not None and depth >= max_depth:
                return False
            if not _check_entries(value, resolved, True, max_depth, depth + 1):
                return False
            continue

        if not resolved.matches(value):
            return False
    return True
