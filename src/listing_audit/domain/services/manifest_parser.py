from __future__ import annotations

from listing_audit.domain.errors import ManifestError
from listing_audit.domain.models.manifest_record import ManifestRecord

FIELD_DELIMITER = ","
MIN_FIELDS = 3


def parse_manifest_text(text: str) -> dict[str, ManifestRecord]:
    """Decode manifest text into records keyed by file name.

    The first line is a header and is always dropped. Data lines with fewer
    than three fields are skipped, extra fields are ignored, and a repeated
    name replaces the earlier record.
    """
    lines = text.strip().split("\n")
    if len(lines) < 2:
        raise ManifestError("Manifest appears to be empty or only contains headers")

    records: dict[str, ManifestRecord] = {}
    for raw_line in lines[1:]:
        line = raw_line.strip()
        if not line:
            continue
        fields = [field.strip() for field in line.split(FIELD_DELIMITER)]
        if len(fields) < MIN_FIELDS:
            continue
        record = ManifestRecord(
            name=fields[0],
            size_label=fields[1],
            modified_text=fields[2],
        )
        records[record.name] = record
    return records
