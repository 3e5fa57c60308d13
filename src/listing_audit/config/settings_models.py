from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_MANIFEST_NAME = "ocr-data.csv"
DEFAULT_PROGRAM_NAME = "compare-listings.py"


class AuditSettings(BaseModel):
    manifest_name: str = Field(default=DEFAULT_MANIFEST_NAME)
    program_name: str = Field(default=DEFAULT_PROGRAM_NAME)
    tolerance_ms: int = Field(default=2000, ge=0)
    log_level: str = Field(default="info")
    error_log_file: str = Field(default="")

    @field_validator("manifest_name", "program_name")
    @classmethod
    def _validate_file_name(cls, value: str) -> str:
        normalized = str(value or "").strip()
        if not normalized:
            raise ValueError("file name must not be empty")
        if Path(normalized).name != normalized:
            raise ValueError("file name must not contain a directory part")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = str(value or "").strip().lower()
        if normalized not in {"debug", "info", "warn", "warning", "error"}:
            raise ValueError("LOG_LEVEL must be one of: debug, info, warn, error")
        return "warning" if normalized == "warn" else normalized

    @field_validator("error_log_file")
    @classmethod
    def _validate_error_log_file(cls, value: str) -> str:
        normalized = str(value or "").strip()
        if normalized and Path(normalized).name != normalized:
            raise ValueError("file name must not contain a directory part")
        return normalized

    @model_validator(mode="after")
    def _validate_error_log_target(self) -> AuditSettings:
        if self.error_log_file in {self.manifest_name, self.program_name}:
            raise ValueError("error_log_file must differ from manifest_name and program_name")
        return self


@dataclass(frozen=True)
class RuntimePaths:
    target_dir: Path
    manifest_path: Path
    error_log_path: Path | None


@dataclass(frozen=True)
class AppConfig:
    user: AuditSettings
    paths: RuntimePaths

    @property
    def excluded_names(self) -> frozenset[str]:
        names = {self.user.manifest_name, self.user.program_name}
        if self.user.error_log_file:
            names.add(self.user.error_log_file)
        return frozenset(names)
