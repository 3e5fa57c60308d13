from __future__ import annotations

from tabulate import tabulate

from listing_audit.domain.models.report import Report
from listing_audit.domain.services.timestamp_format import format_timestamp

RULE = "=" * 60


def _section(title: str, count: int, blocks: list[list[str]]) -> list[str]:
    lines = ["", f"{title}: {count} file(s)"]
    for block in blocks:
        lines.extend(f"   {line}" for line in block[:1])
        lines.extend(f"      {line}" for line in block[1:])
    return lines


def _mismatch_block(report: Report) -> list[list[str]]:
    blocks: list[list[str]] = []
    for item in report.mismatches:
        if item.reason is not None:
            blocks.append([item.name, item.reason])
            continue
        diff_seconds = (item.diff_ms or 0) / 1000
        blocks.append(
            [
                item.name,
                f"Manifest: {item.manifest_text}",
                f"Actual:   {format_timestamp(item.actual_modified)}",
                f"Diff:     {diff_seconds:.1f} seconds",
            ]
        )
    return blocks


def render_report(report: Report, manifest_name: str, program_name: str) -> str:
    lines = [RULE, "COMPARISON RESULTS", RULE]
    lines += _section(
        "MATCHES",
        report.match_count,
        [[item.name, f"Date: {item.manifest_text}"] for item in report.matches],
    )
    lines += _section("MISMATCHES", report.mismatch_count, _mismatch_block(report))
    lines += _section(
        "MISSING IN DIRECTORY",
        report.missing_count,
        [[item.name, f"Expected: {item.manifest_text}"] for item in report.missing_in_directory],
    )
    lines += _section(
        "EXTRA IN DIRECTORY",
        report.extra_count,
        [
            [item.name, f"Actual: {format_timestamp(item.actual_modified)}"]
            for item in report.extra_in_directory
        ],
    )

    rows = [
        ("Manifest file", manifest_name),
        ("Program file", program_name),
        ("Files in manifest", report.manifest_count),
        ("Files in directory", report.directory_count),
        ("Matches", report.match_count),
        ("Mismatches", report.mismatch_count),
        ("Missing in directory", report.missing_count),
        ("Extra in directory", report.extra_count),
    ]
    lines += ["", RULE, "SUMMARY", RULE]
    lines.append(tabulate(rows, tablefmt="plain", disable_numparse=True))
    lines.append(RULE)

    if report.is_clean:
        lines += ["", "All files match perfectly!"]
    else:
        lines += ["", "Discrepancies found!"]
    return "\n".join(lines)
