"""Runtime type and shape validation for list and mapping data."""

import logging

from .type_checking import (
    DEFAULT_OPTIONAL_MARKER,
    EMPTY_REGISTRY,
    ExpectedArrayError,
    MappingTypeRegistry,
    MissingKeyError,
    NestingTooDeepError,
    PrimitiveKind,
    TypeCheckError,
    TypeMismatchError,
    TypeRegistry,
    UnknownTypeTokenError,
    assert_elements_of_type,
    assert_structure,
    check_elements_of_type,
    check_structure,
    describe_type,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

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
    "describe_type",
    "DEFAULT_OPTIONAL_MARKER",
    "EMPTY_REGISTRY",
    "MappingTypeRegistry",
    "TypeRegistry",
    "PrimitiveKind",
]
