"""Frozen dataclasses describing one audit run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuditIssue:
    """One legacy-token occurrence on one line."""

    path: str
    line: int
    token: str
    content: str
    replacement: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "line": self.line,
            "token": self.token,
            "content": self.content,
            "replacement": self.replacement,
        }


@dataclass(frozen=True)
class FileIssues:
    """All surviving issues for a single scanned file, in line order."""

    path: str
    issues: tuple[AuditIssue, ...]


@dataclass(frozen=True)
class ReadFailure:
    """A file or directory the audit could not read."""

    path: str
    message: str


@dataclass(frozen=True)
class AuditReport:
    """Aggregate result of one audit run."""

    root: str
    files: tuple[FileIssues, ...]
    scanned_files: int
    token_count: int
    duration_seconds: float
    read_failures: tuple[ReadFailure, ...] = ()

    @property
    def total_issues(self) -> int:
        return sum(len(entry.issues) for entry in self.files)

    @property
    def is_clean(self) -> bool:
        return self.total_issues == 0

    @property
    def exit_code(self) -> int:
        """Process exit status: 0 when clean, 1 when legacy tokens remain."""
        return 0 if self.is_clean else 1

    @property
    def duration_ms(self) -> int:
        return int(self.duration_seconds * 1000)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "root": self.root,
            "scanned_files": self.scanned_files,
            "token_count": self.token_count,
            "total_issues": self.total_issues,
            "files": [
                {"path": entry.path, "issues": [issue.to_dict() for issue in entry.issues]} for entry in self.files
            ],
            "read_failures": [{"path": f.path, "message": f.message} for f in self.read_failures],
        }
