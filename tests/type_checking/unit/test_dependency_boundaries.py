"""Boundary tests for the type checking engine."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_engine_does_not_import_io_or_cli_layers() -> None:
    engine_dir = _project_root() / "src" / "container_typecheck" / "type_checking"
    forbidden_import_fragments = (
        "import yaml",
        "import click",
        "import json",
        "container_typecheck.configuration",
        "container_typecheck.document_reading",
        "container_typecheck.cli",
    )

    for module_path in sorted(engine_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden engine dependency in {module_path}: {fragment}"
