from __future__ import annotations

from pathlib import Path

from listing_audit.application.adapters.repositories.directory_scanner import DirectoryScanner
from listing_audit.application.adapters.repositories.manifest_reader import ManifestReader
from listing_audit.domain.models.report import Report
from listing_audit.domain.protocols.logger_port import LoggerPort
from listing_audit.domain.services.reconciler import reconcile


class AuditListing:
    def __init__(
        self,
        manifest_reader: ManifestReader,
        scanner: DirectoryScanner,
        target_dir: Path,
        logger: LoggerPort,
        tolerance_ms: int,
    ) -> None:
        self._manifest_reader = manifest_reader
        self._scanner = scanner
        self._target_dir = target_dir
        self._logger = logger
        self._tolerance_ms = tolerance_ms

    def __call__(self) -> Report:
        self._logger.info("Starting file comparison in %s", self._target_dir)

        # Manifest first: a broken manifest must abort before the directory is touched.
        manifest = self._manifest_reader.read()
        self._logger.info(
            "Found %d file(s) in manifest %s",
            len(manifest),
            self._manifest_reader.path.name,
        )

        directory = self._scanner.scan(self._target_dir)
        self._logger.info(
            "Found %d file(s) in directory (excluding %s)",
            len(directory),
            ", ".join(sorted(self._scanner.excluded_names)),
        )

        report = reconcile(manifest, directory, self._tolerance_ms)
        self._logger.info(
            "Comparison finished: matches: %d, mismatches: %d, missing: %d, extra: %d",
            report.match_count,
            report.mismatch_count,
            report.missing_count,
            report.extra_count,
        )
        return report
