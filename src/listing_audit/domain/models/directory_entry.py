from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    name: str
    # Naive local time, sub-second precision kept.
    modified_at: datetime
