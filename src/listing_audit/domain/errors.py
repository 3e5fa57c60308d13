from __future__ import annotations


class ListingAuditError(Exception):
    """Base class for every error raised by the audit."""


class ManifestError(ListingAuditError):
    """Manifest could not be read or holds no data rows. Fatal."""


class ScanError(ListingAuditError):
    """Target directory could not be listed. Fatal."""


class EntryStatError(ListingAuditError):
    """Metadata of a single directory entry could not be read."""

    def __init__(self, name: str, cause: OSError) -> None:
        super().__init__(f"Could not stat file '{name}': {cause.strerror or cause}")
        self.name = name


class DateParseError(ListingAuditError, ValueError):
    """Manifest timestamp is not in DD.MM.YYYY HH:MM:SS form."""
