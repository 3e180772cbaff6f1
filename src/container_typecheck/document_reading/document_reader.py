"""Data document reading service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


class DocumentReadError(Exception):
    """Raised when a data document cannot be read or parsed."""


def read_data_document(document_path: Path | str) -> Any:
    """Parse a JSON or YAML document into plain Python values.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.
    """
    path = Path(document_path)
    if not path.exists():
        raise DocumentReadError(f"Data file not found: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise DocumentReadError(f"Invalid JSON in {path}: {exc}") from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentReadError(f"Invalid YAML in {path}: {exc}") from exc
