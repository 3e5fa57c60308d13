from __future__ import annotations

from datetime import datetime

from listing_audit.domain.errors import DateParseError

MANIFEST_DATE_FORMAT = "%d.%m.%Y %H:%M:%S"


def parse_manifest_timestamp(text: str) -> datetime:
    """Parse a manifest timestamp (``DD.MM.YYYY HH:MM:SS``) as naive local time."""
    value = (text or "").strip()
    try:
        return datetime.strptime(value, MANIFEST_DATE_FORMAT)
    except ValueError as exc:
        raise DateParseError(f"Unparseable manifest date: {value!r}") from exc


def format_timestamp(value: datetime) -> str:
    return value.strftime(MANIFEST_DATE_FORMAT)
