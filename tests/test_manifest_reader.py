from __future__ import annotations

from pathlib import Path

import pytest

from listing_audit.application.adapters.repositories.manifest_reader import ManifestReader
from listing_audit.domain.errors import ManifestError
from tests.fixtures import write_manifest


def test_manifest_reader_given_manifest_file_when_read_then_returns_records(temp_workspace: Path):
    path = write_manifest(temp_workspace, "ocr-data.csv", ["a.txt,100,01.01.2024 10:00:00"])

    records = ManifestReader(path).read()

    assert list(records) == ["a.txt"]
    assert records["a.txt"].size_label == "100"


def test_manifest_reader_given_missing_file_when_read_then_raises_manifest_error(
    temp_workspace: Path,
):
    reader = ManifestReader(temp_workspace / "ocr-data.csv")

    with pytest.raises(ManifestError, match="ocr-data.csv") as exc:
        _ = reader.read()

    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_manifest_reader_given_non_utf8_file_when_read_then_raises_manifest_error(
    temp_workspace: Path,
):
    path = temp_workspace / "ocr-data.csv"
    path.write_bytes(b"Name,Size,Modified\n\xff\xfe,1,01.01.2024 10:00:00\n")

    with pytest.raises(ManifestError):
        _ = ManifestReader(path).read()


def test_manifest_reader_given_header_only_when_read_then_raises_manifest_error(
    temp_workspace: Path,
):
    path = write_manifest(temp_workspace, "ocr-data.csv", [])

    with pytest.raises(ManifestError, match="only contains headers"):
        _ = ManifestReader(path).read()
