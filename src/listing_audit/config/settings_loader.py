from __future__ import annotations

import configparser
from pathlib import Path

from listing_audit.config.settings_models import AppConfig, AuditSettings, RuntimePaths

SETTINGS_SECTION = "audit"


class SettingsLoader:
    @staticmethod
    def _read_values(settings_path: Path | None) -> dict[str, str]:
        if settings_path is None or not settings_path.exists():
            return {}
        parser = configparser.ConfigParser()
        with settings_path.open("r", encoding="utf-8") as stream:
            parser.read_file(stream)
        if not parser.has_section(SETTINGS_SECTION):
            return {}
        return {key: value for key, value in parser.items(SETTINGS_SECTION)}

    @classmethod
    def load(cls, settings_path: Path | None = None) -> AppConfig:
        user = AuditSettings.model_validate(cls._read_values(settings_path))
        target_dir = Path.cwd()
        error_log_path = target_dir / user.error_log_file if user.error_log_file else None
        paths = RuntimePaths(
            target_dir=target_dir,
            manifest_path=target_dir / user.manifest_name,
            error_log_path=error_log_path,
        )
        return AppConfig(user=user, paths=paths)
