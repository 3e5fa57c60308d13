from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

INVALID_DATE_REASON = "Invalid CSV date format"


@dataclass(frozen=True, slots=True)
class InvalidManifestDate:
    reason: str = INVALID_DATE_REASON


@dataclass(frozen=True, slots=True)
class TimestampDrift:
    diff_ms: int


MismatchDetail = Union[InvalidManifestDate, TimestampDrift]


@dataclass(frozen=True, slots=True)
class Match:
    name: str
    manifest_text: str
    actual_modified: datetime


@dataclass(frozen=True, slots=True)
class Mismatch:
    name: str
    manifest_text: str
    actual_modified: datetime
    detail: MismatchDetail

    @property
    def reason(self) -> str | None:
        if isinstance(self.detail, InvalidManifestDate):
            return self.detail.reason
        return None

    @property
    def diff_ms(self) -> int | None:
        if isinstance(self.detail, TimestampDrift):
            return self.detail.diff_ms
        return None


@dataclass(frozen=True, slots=True)
class MissingInDirectory:
    name: str
    manifest_text: str


@dataclass(frozen=True, slots=True)
class ExtraInDirectory:
    name: str
    actual_modified: datetime


Outcome = Union[Match, Mismatch, MissingInDirectory, ExtraInDirectory]
