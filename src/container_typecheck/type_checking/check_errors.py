"""Type check failure taxonomy."""

from __future__ import annotations


class TypeCheckError(ValueError):
    """Raised when a value does not satisfy its expected type or schema.

    Attributes:
      path: Rendered location of the failing value, empty for the root.
      expected: Expected type token, ``"array"`` for nested schemas.
      actual: Description of the value found, ``"missing"`` for absent keys.
    """

    def __init__(self, message: str, path: str = "", expected: str = "", actual: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.expected = expected
        self.actual = actual


class UnknownTypeTokenError(TypeCheckError):
    """Expected type names neither a primitive kind nor a registered type."""


class TypeMismatchError(TypeCheckError):
    """A leaf value does not satisfy the expected type token."""


class MissingKeyError(TypeCheckError):
    """A required schema field is absent from the data."""


class ExpectedArrayError(TypeCheckError):
    """A nested schema was matched against a non-container value."""


class NestingTooDeepError(TypeCheckError):
    """Input nesting exceeded the configured maximum depth."""
