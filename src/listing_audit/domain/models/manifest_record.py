from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ManifestRecord:
    name: str
    size_label: str
    modified_text: str
