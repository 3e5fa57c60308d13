from __future__ import annotations

from datetime import timedelta
from typing import Mapping

from listing_audit.domain.errors import DateParseError
from listing_audit.domain.models.directory_entry import DirectoryEntry
from listing_audit.domain.models.manifest_record import ManifestRecord
from listing_audit.domain.models.outcome import (
    ExtraInDirectory,
    InvalidManifestDate,
    Match,
    Mismatch,
    MissingInDirectory,
    TimestampDrift,
)
from listing_audit.domain.models.report import Report
from listing_audit.domain.services.timestamp_format import parse_manifest_timestamp

DEFAULT_TOLERANCE_MS = 2000

_ONE_MS = timedelta(milliseconds=1)


def reconcile(
    manifest: Mapping[str, ManifestRecord],
    directory: Mapping[str, DirectoryEntry],
    tolerance_ms: int = DEFAULT_TOLERANCE_MS,
) -> Report:
    """Classify every name of ``manifest`` and ``directory`` into one bucket.

    Manifest-driven buckets follow manifest order, the extra bucket follows
    directory order. A manifest date that cannot be parsed is a mismatch on
    its own, whatever the directory timestamp is.
    """
    matches: list[Match] = []
    mismatches: list[Mismatch] = []
    missing: list[MissingInDirectory] = []
    extra: list[ExtraInDirectory] = []

    for name, record in manifest.items():
        entry = directory.get(name)
        if entry is None:
            missing.append(MissingInDirectory(name=name, manifest_text=record.modified_text))
            continue

        try:
            expected = parse_manifest_timestamp(record.modified_text)
        except DateParseError:
            mismatches.append(
                Mismatch(
                    name=name,
                    manifest_text=record.modified_text,
                    actual_modified=entry.modified_at,
                    detail=InvalidManifestDate(),
                )
            )
            continue

        # Compared at whole-millisecond resolution; modified_at keeps full precision.
        actual = entry.modified_at.replace(
            microsecond=entry.modified_at.microsecond // 1000 * 1000
        )
        diff_ms = abs(expected - actual) // _ONE_MS
        if diff_ms <= tolerance_ms:
            matches.append(
                Match(
                    name=name,
                    manifest_text=record.modified_text,
                    actual_modified=entry.modified_at,
                )
            )
        else:
            mismatches.append(
                Mismatch(
                    name=name,
                    manifest_text=record.modified_text,
                    actual_modified=entry.modified_at,
                    detail=TimestampDrift(diff_ms=diff_ms),
                )
            )

    for name, entry in directory.items():
        if name in manifest:
            continue
        extra.append(ExtraInDirectory(name=name, actual_modified=entry.modified_at))

    return Report(
        matches=tuple(matches),
        mismatches=tuple(mismatches),
        missing_in_directory=tuple(missing),
        extra_in_directory=tuple(extra),
        manifest_count=len(manifest),
        directory_count=len(directory),
    )
