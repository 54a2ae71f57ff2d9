"""Scan-time exceptions."""

from __future__ import annotations

from pathlib import Path

from brandaudit.exceptions.base import BrandAuditError


class FileReadError(BrandAuditError, OSError):
    """Raised when a candidate file cannot be read as UTF-8 text."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Error reading file {path}: {reason}")
        self.path = path
        self.reason = reason
