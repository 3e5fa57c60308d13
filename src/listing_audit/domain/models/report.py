from __future__ import annotations

from dataclasses import dataclass

from listing_audit.domain.models.outcome import (
    ExtraInDirectory,
    Match,
    Mismatch,
    MissingInDirectory,
    Outcome,
)


@dataclass(frozen=True, slots=True)
class Report:
    matches: tuple[Match, ...]
    mismatches: tuple[Mismatch, ...]
    missing_in_directory: tuple[MissingInDirectory, ...]
    extra_in_directory: tuple[ExtraInDirectory, ...]
    manifest_count: int
    directory_count: int

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def mismatch_count(self) -> int:
        return len(self.mismatches)

    @property
    def missing_count(self) -> int:
        return len(self.missing_in_directory)

    @property
    def extra_count(self) -> int:
        return len(self.extra_in_directory)

    @property
    def discrepancy_count(self) -> int:
        return self.mismatch_count + self.missing_count + self.extra_count

    @property
    def is_clean(self) -> bool:
        return self.discrepancy_count == 0

    def outcomes(self) -> tuple[Outcome, ...]:
        return (
            *self.matches,
            *self.mismatches,
            *self.missing_in_directory,
            *self.extra_in_directory,
        )
