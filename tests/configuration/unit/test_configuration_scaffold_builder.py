"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from container_typecheck.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from container_typecheck.configuration.loader import load_configuration


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Check configuration template" in scaffold
    assert "schema:" in scaffold
    assert "inline:" in scaffold
    assert "options:" in scaffold
    assert "optional_marker:" in scaffold
    assert "types:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold


def test_write_placeholder_configuration_writes_loadable_file(tmp_path: Path) -> None:
    output_path = tmp_path / "typecheck.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")
    configuration = load_configuration(output_path)
    assert configuration.schema is not None
    assert configuration.options.optional_marker == "?"


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "typecheck.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
