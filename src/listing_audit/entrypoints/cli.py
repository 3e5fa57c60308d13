from __future__ import annotations

import logging
from pathlib import Path

from listing_audit.bootstrap.container import Container
from listing_audit.config.logging_setup import configure_logging
from listing_audit.config.settings_loader import SettingsLoader
from listing_audit.domain.errors import ManifestError, ScanError
from listing_audit.presentation.report_renderer import render_report

EXIT_CLEAN = 0
EXIT_DISCREPANCIES = 1
EXIT_FATAL = 1


def main(settings_file: Path | None = None) -> int:
    config = SettingsLoader.load(settings_file)

    configure_logging(config.user.log_level, config.paths.error_log_path)
    log = logging.getLogger("listing_audit.cli")

    audit = Container(config).build_audit_use_case()
    try:
        report = audit()
    except (ManifestError, ScanError) as exc:
        log.error("%s", exc)
        return EXIT_FATAL

    print(render_report(report, config.user.manifest_name, config.user.program_name))
    return EXIT_CLEAN if report.is_clean else EXIT_DISCREPANCIES
