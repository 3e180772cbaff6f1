"""Type checking engine exports."""

from .check_errors import (
    ExpectedArrayError,
    MissingKeyError,
    NestingTooDeepError,
    TypeCheckError,
    TypeMismatchError,
    UnknownTypeTokenError,
)
from .element_matcher import assert_elements_of_type, check_elements_of_type
from .structure_validator import DEFAULT_OPTIONAL_MARKER, assert_structure, check_structure
from .type_description import describe_type
from .type_registry import EMPTY_REGISTRY, MappingTypeRegistry, TypeRegistry
from .type_tokens import PrimitiveKind, resolve_type_token

__all__ = [
    "TypeCheckError",
    "UnknownTypeTokenError",
    "TypeMismatchError",
    "MissingKeyError",
    "ExpectedArrayError",
    "NestingTooDeepError",
    "assert_elements_of_type",
    "check_elements_of_type",
    "assert_structure",
    "check_structure",
    "DEFAULT_OPTIONAL_MARKER",
    "describe_type",
    "EMPTY_REGISTRY",
    "MappingTypeRegistry",
    "TypeRegistry",
    "PrimitiveKind",
    "resolve_type_token",
]
