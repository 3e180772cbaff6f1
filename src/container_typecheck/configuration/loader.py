"""Configuration loader service."""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from container_typecheck.document_reading import DocumentReadError, read_data_document

from .runtime_settings import Configuration, SchemaSettings, ValidationOptions


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    options = _parse_options_section(parsed.get("options"))
    nominal_types = _parse_types_section(parsed.get("types"))

    return Configuration(
        path=path,
        schema=schema,
        options=options,
        nominal_types=nominal_types,
    )


def _parse_schema_section(value: Any, base_path: Path) -> SchemaSettings | None:
    if value is None:
        return None
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        _validate_schema_definition(inline, "schema.inline")
        return SchemaSettings(definition=inline, source_path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("Schema path must be a string.")
        schema_path = _resolve_path(base_path, path_value)
        try:
            definition = read_data_document(schema_path)
        except DocumentReadError as exc:
            raise ConfigurationError(str(exc)) from exc
        _validate_schema_definition(definition, str(schema_path))
        return SchemaSettings(definition=definition, source_path=schema_path)
    raise ConfigurationError("Schema definition requires either inline or path.")


def _validate_schema_definition(definition: Any, label: str) -> None:
    if not isinstance(definition, Mapping) or not definition:
        raise ConfigurationError(f"{label} must be a non-empty mapping of field names.")
    for key, expected in definition.items():
        if not isinstance(key, str) or not key.strip():
            raise ConfigurationError(f"{label} keys must be non-empty strings.")
        if isinstance(expected, Mapping):
            _validate_schema_definition(expected, f"{label}.{key}")
            continue
        if not isinstance(expected, str) or not expected.strip():
            raise ConfigurationError(f"{label}.{key} must be a type name or a nested schema.")


def _parse_options_section(value: Any) -> ValidationOptions:
    if value is None:
        return ValidationOptions()
    section = _require_mapping(value, "options")
    optional_marker = section.get("optional_marker", ValidationOptions.optional_marker)
    if not isinstance(optional_marker, str) or not optional_marker:
        raise ConfigurationError("options.optional_marker must be a non-empty string.")
    max_depth = section.get("max_depth")
    if max_depth is not None:
        max_depth = _require_positive_int(max_depth, "options.max_depth")
    return ValidationOptions(optional_marker=optional_marker, max_depth=max_depth)


def _parse_types_section(value: Any) -> dict[str, type]:
    if value is None:
        return {}
    section = _require_mapping(value, "types")
    nominal_types: dict[str, type] = {}
    for name, import_path in section.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("types keys must be non-empty strings.")
        label = f"types.{name}"
        nominal_types[name.strip()] = _import_class(
            _require_non_empty_string(import_path, label), label
        )
    return nominal_types


def _import_class(import_path: str, label: str) -> type:
    if ":" in import_path:
        module_name, _, attribute = import_path.partition(":")
    else:
        module_name, _, attribute = import_path.rpartition(".")
    if not module_name or not attribute:
        raise ConfigurationError(f"{label} must look like 'package.module:ClassName'.")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"{label}: cannot import module '{module_name}': {exc}") from exc

    resolved: Any = module
    for part in attribute.split("."):
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"{label}: '{module_name}' has no attribute '{attribute}'."
            ) from exc
    if not isinstance(resolved, type):
        raise ConfigurationError(f"{label}: '{import_path}' is not a class.")
    return resolved


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
