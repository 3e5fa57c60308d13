from __future__ import annotations

import logging

from listing_audit.application.adapters.repositories.directory_scanner import DirectoryScanner
from listing_audit.application.adapters.repositories.manifest_reader import ManifestReader
from listing_audit.application.use_cases.audit_listing import AuditListing
from listing_audit.config.settings_models import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.logger = logging.getLogger("listing_audit")

        self.manifest_reader = ManifestReader(config.paths.manifest_path)
        self.scanner = DirectoryScanner(config.excluded_names, self.logger)

    def build_audit_use_case(self) -> AuditListing:
        return AuditListing(
            manifest_reader=self.manifest_reader,
            scanner=self.scanner,
            target_dir=self.config.paths.target_dir,
            logger=self.logger,
            tolerance_ms=self.config.user.tolerance_ms,
        )
