from listing_audit.domain.models.directory_entry import DirectoryEntry
from listing_audit.domain.models.manifest_record import ManifestRecord
from listing_audit.domain.models.outcome import (
    ExtraInDirectory,
    InvalidManifestDate,
    Match,
    Mismatch,
    MissingInDirectory,
    Outcome,
    TimestampDrift,
)
from listing_audit.domain.models.report import Report

__all__ = [
    "DirectoryEntry",
    "ManifestRecord",
    "ExtraInDirectory",
    "InvalidManifestDate",
    "Match",
    "Mismatch",
    "MissingInDirectory",
    "Outcome",
    "TimestampDrift",
    "Report",
]
