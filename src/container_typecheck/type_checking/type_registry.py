"""Host type registry used to resolve nominal type tokens."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol


class TypeRegistry(Protocol):
    """Capability deciding which names denote nominal types."""

    def is_known_type(self, name: str) -> bool:
        """Return True when ``name`` identifies a registered type."""

    def is_instance_of(self, value: object, name: str) -> bool:
        """Return True when ``value`` is an instance of the type named ``name``."""


class MappingTypeRegistry:
    """Registry backed by an explicit name-to-class mapping.

    Abstract base classes and ``runtime_checkable`` protocols are matched
    through ``isinstance`` like any other class.
    """

    def __init__(self, types: Mapping[str, type] | None = None) -> None:
        self._types: Mapping[str, type] = MappingProxyType(dict(types or {}))

    @classmethod
    def from_classes(cls, *classes: type) -> MappingTypeRegistry:
        """Register each class under its ``__name__`` and ``__qualname__``."""
        types: dict[str, type] = {}
        for klass in classes:
            types[klass.__name__] = klass
            types[klass.__qualname__] = klass
        return cls(types)

    def with_types(self, types: Mapping[str, type]) -> MappingTypeRegistry:
        """Return a new registry extended with ``types``."""
        return MappingTypeRegistry({**self._types, **types})

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._types)

    def is_known_type(self, name: str) -> bool:
        return name in self._types

    def is_instance_of(self, value: object, name: str) -> bool:
        klass = self._types.get(name)
        if klass is None:
            return False
        return isinstance(value, klass)


EMPTY_REGISTRY = MappingTypeRegistry()
