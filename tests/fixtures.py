from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

MANIFEST_HEADER = "Name,Size,Modified"


def write_file(directory: Path, name: str, modified_at: datetime, content: str = "x") -> Path:
    path = directory / name
    path.write_text(content, encoding="utf-8")
    mtime_ns = int(modified_at.timestamp()) * 1_000_000_000 + modified_at.microsecond * 1000
    os.utime(path, ns=(mtime_ns, mtime_ns))
    return path


def write_manifest(directory: Path, name: str, rows: list[str]) -> Path:
    path = directory / name
    path.write_text("\n".join([MANIFEST_HEADER, *rows]) + "\n", encoding="utf-8")
    return path
