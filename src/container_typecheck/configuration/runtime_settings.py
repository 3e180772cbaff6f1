"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from container_typecheck.type_checking import DEFAULT_OPTIONAL_MARKER, MappingTypeRegistry


@dataclass(frozen=True)
class SchemaSettings:
    """Normalized schema settings."""

    definition: Mapping[str, Any]
    source_path: Path | None


@dataclass(frozen=True)
class ValidationOptions:
    """Knobs forwarded to the structure and element validators."""

    optional_marker: str = DEFAULT_OPTIONAL_MARKER
    max_depth: int | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaSettings | None
    options: ValidationOptions
    nominal_types: Mapping[str, type] = field(default_factory=dict)

    def build_registry(self) -> MappingTypeRegistry:
        """Return a registry containing the configured nominal types."""
        return MappingTypeRegistry(self.nominal_types)
