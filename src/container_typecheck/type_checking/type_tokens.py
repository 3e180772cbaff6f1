"""Expected type token normalization and resolution."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .container_paths import is_container
from .type_registry import TypeRegistry

_SCALAR_TYPES = (bool, int, float, str, bytes, bytearray)


class PrimitiveKind(str, Enum):
    """Primitive kinds an expected type token may name."""

    INT = "int"
    STRING = "string"
    FLOAT = "float"
    BOOL = "bool"
    ARRAY = "array"
    OBJECT = "object"
    CALLABLE = "callable"
    MIXED = "mixed"


def _is_object(value: object) -> bool:
    return value is not None and not isinstance(value, _SCALAR_TYPES) and not is_container(value)


_PRIMITIVE_PREDICATES: dict[PrimitiveKind, Callable[[object], bool]] = {
    PrimitiveKind.INT: lambda value: isinstance(value, int) and not isinstance(value, bool),
    PrimitiveKind.STRING: lambda value: isinstance(value, str),
    PrimitiveKind.FLOAT: lambda value: isinstance(value, float),
    PrimitiveKind.BOOL: lambda value: isinstance(value, bool),
    PrimitiveKind.ARRAY: is_container,
    PrimitiveKind.OBJECT: _is_object,
    PrimitiveKind.CALLABLE: callable,
    PrimitiveKind.MIXED: lambda value: True,
}


@dataclass(frozen=True)
class PrimitiveToken:
    """Token naming one of the fixed primitive kinds."""

    kind: PrimitiveKind

    @property
    def expected(self) -> str:
        return self.kind.value

    def matches(self, value: object) -> bool:
        return _PRIMITIVE_PREDICATES[self.kind](value)


@dataclass(frozen=True)
class NominalToken:
    """Token naming a type known to the host registry."""

    name: str
    registry: TypeRegistry

    @property
    def expected(self) -> str:
        return self.name

    def matches(self, value: object) -> bool:
        return self.registry.is_instance_of(value, self.name)


@dataclass(frozen=True)
class ClassToken:
    """Token given directly as a Python class."""

    klass: type

    @property
    def expected(self) -> str:
        return self.klass.__name__

    def matches(self, value: object) -> bool:
        return isinstance(value, self.klass)


ResolvedTypeToken = PrimitiveToken | NominalToken | ClassToken


def normalize_type_token(token: object) -> str:
    """Render a token the way it appears in diagnostics for unknown types."""
    if isinstance(token, type):
        return token.__name__
    return str(token).strip().lower()


def resolve_type_token(token: str | type, registry: TypeRegistry) -> ResolvedTypeToken | None:
    """Resolve an expected type token once, returning None when it is unknown.

    Registered nominal names are matched before primitive kinds and keep
    their original casing. Primitive kinds are case and whitespace insensitive.
    """
    if isinstance(token, type):
        return ClassToken(klass=token)
    if not isinstance(token, str):
        return None
    stripped = token.strip()
    if stripped and registry.is_known_type(stripped):
        return NominalToken(name=stripped, registry=registry)
    try:
        return PrimitiveToken(kind=PrimitiveKind(stripped.lower()))
    except ValueError:
        return None
