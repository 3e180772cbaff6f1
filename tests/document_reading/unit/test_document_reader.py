"""Data document reader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from container_typecheck.document_reading import DocumentReadError, read_data_document


def test_reads_json_documents(tmp_path: Path) -> None:
    path = tmp_path / "payload.json"
    path.write_text(json.dumps({"ids": [1, 2], "name": "x"}), encoding="utf-8")

    assert read_data_document(path) == {"ids": [1, 2], "name": "x"}


def test_reads_yaml_documents(tmp_path: Path) -> None:
    path = tmp_path / "payload.yaml"
    path.write_text("ids:\n  - 1\n  - 2\nratio: 0.5\n", encoding="utf-8")

    assert read_data_document(str(path)) == {"ids": [1, 2], "ratio": 0.5}


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(DocumentReadError, match="not found"):
        read_data_document(tmp_path / "absent.json")


@pytest.mark.parametrize(
    ("filename", "contents"),
    [
        ("broken.json", "{not json"),
        ("broken.yaml", "key: [unclosed"),
    ],
)
def test_invalid_documents_raise(tmp_path: Path, filename: str, contents: str) -> None:
    path = tmp_path / filename
    path.write_text(contents, encoding="utf-8")

    with pytest.raises(DocumentReadError):
        read_data_document(path)
