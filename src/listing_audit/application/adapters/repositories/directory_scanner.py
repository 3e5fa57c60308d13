from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Iterable

from listing_audit.domain.errors import EntryStatError, ScanError
from listing_audit.domain.models.directory_entry import DirectoryEntry
from listing_audit.domain.protocols.logger_port import LoggerPort


class DirectoryScanner:
    def __init__(self, excluded_names: Iterable[str], logger: LoggerPort) -> None:
        self._excluded_names = frozenset(excluded_names)
        self._logger = logger

    @property
    def excluded_names(self) -> frozenset[str]:
        return self._excluded_names

    @staticmethod
    def _stat(entry: os.DirEntry[str]) -> DirectoryEntry:
        try:
            mtime_ns = entry.stat().st_mtime_ns
        except OSError as exc:
            raise EntryStatError(entry.name, exc) from exc
        seconds, remainder_ns = divmod(mtime_ns, 1_000_000_000)
        modified_at = datetime.fromtimestamp(seconds).replace(
            microsecond=remainder_ns // 1000
        )
        return DirectoryEntry(name=entry.name, modified_at=modified_at)

    def _list_files(self, directory: Path) -> list[os.DirEntry[str]]:
        try:
            with os.scandir(directory) as it:
                return [
                    entry
                    for entry in it
                    if entry.is_file(follow_symlinks=False)
                    and entry.name not in self._excluded_names
                ]
        except OSError as exc:
            raise ScanError(f"Error reading directory {directory}: {exc}") from exc

    def scan(self, directory: Path) -> dict[str, DirectoryEntry]:
        files: dict[str, DirectoryEntry] = {}
        for entry in sorted(self._list_files(directory), key=lambda item: item.name):
            try:
                files[entry.name] = self._stat(entry)
            except EntryStatError as exc:
                self._logger.warning("Skipping entry: %s", exc)
        return files
