from __future__ import annotations

import pytest

from listing_audit.domain.errors import ManifestError
from listing_audit.domain.models.manifest_record import ManifestRecord
from listing_audit.domain.services.manifest_parser import parse_manifest_text


def test_parse_manifest_text_given_rows_then_skips_header_and_trims_fields():
    text = "Name,Size,Modified\n a.txt , 100 , 01.01.2024 10:00:00 \nb.txt,7,02.01.2024 11:30:00\n"

    records = parse_manifest_text(text)

    assert list(records) == ["a.txt", "b.txt"]
    assert records["a.txt"] == ManifestRecord(
        name="a.txt", size_label="100", modified_text="01.01.2024 10:00:00"
    )


def test_parse_manifest_text_given_short_blank_and_long_lines_then_keeps_valid_rows_only():
    text = "\n".join(
        [
            "Name,Size,Modified",
            "",
            "too,short",
            "   ",
            "c.txt,3,03.01.2024 09:00:00,extra,columns",
        ]
    )

    records = parse_manifest_text(text)

    assert list(records) == ["c.txt"]
    assert records["c.txt"].modified_text == "03.01.2024 09:00:00"


def test_parse_manifest_text_given_duplicate_names_then_last_row_wins():
    text = "header\na.txt,1,01.01.2024 10:00:00\nb.txt,2,01.01.2024 10:00:00\na.txt,9,05.05.2024 05:05:05\n"

    records = parse_manifest_text(text)

    assert list(records) == ["a.txt", "b.txt"]
    assert records["a.txt"].size_label == "9"
    assert records["a.txt"].modified_text == "05.05.2024 05:05:05"


def test_parse_manifest_text_given_crlf_line_endings_then_parses_rows():
    records = parse_manifest_text("h1,h2,h3\r\na.txt,1,01.01.2024 10:00:00\r\n")

    assert records["a.txt"].modified_text == "01.01.2024 10:00:00"


@pytest.mark.parametrize("text", ["", "   \n\n", "Name,Size,Modified\n", "Name,Size,Modified"])
def test_parse_manifest_text_given_header_only_then_raises_manifest_error(text: str):
    with pytest.raises(ManifestError, match="empty or only contains headers"):
        _ = parse_manifest_text(text)


def test_parse_manifest_text_given_only_short_rows_then_returns_empty_mapping():
    assert parse_manifest_text("header\nonly,two\n") == {}


def test_parse_manifest_text_given_form_feed_in_name_then_keeps_row_whole():
    records = parse_manifest_text("header\nscan\x0cpage.tif,1,01.01.2024 10:00:00\nnext\u2028.txt,2,01.01.2024 10:00:00\n")

    assert list(records) == ["scan\x0cpage.tif", "next\u2028.txt"]
    assert records["scan\x0cpage.tif"].modified_text == "01.01.2024 10:00:00"
