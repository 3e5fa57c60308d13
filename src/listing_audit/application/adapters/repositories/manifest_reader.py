from __future__ import annotations

from pathlib import Path

from listing_audit.domain.errors import ManifestError
from listing_audit.domain.models.manifest_record import ManifestRecord
from listing_audit.domain.services.manifest_parser import parse_manifest_text


class ManifestReader:
    def __init__(self, manifest_path: Path) -> None:
        self._manifest_path = manifest_path

    @property
    def path(self) -> Path:
        return self._manifest_path

    def read(self) -> dict[str, ManifestRecord]:
        try:
            text = self._manifest_path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestError(
                f"Error reading manifest {self._manifest_path.name}: {exc}"
            ) from exc
        return parse_manifest_text(text)
