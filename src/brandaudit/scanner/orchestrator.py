"""End-to-end audit orchestration.

``audit_tree`` is the single entry point: walk, match, aggregate.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from brandaudit.config import AuditConfig
from brandaudit.exceptions import ConfigError, FileReadError
from brandaudit.model import AuditReport, FileIssues, ReadFailure
from brandaudit.scanner.discovery import iter_text_files
from brandaudit.scanner.matcher import scan_file

logger = logging.getLogger(__name__)


def _path_for_display(path: Path, root: Path) -> str:
    """Render a path relative to the scan root when possible."""
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def audit_tree(root: Path, config: AuditConfig | None = None) -> AuditReport:
    """Scan *root* for legacy brand tokens and aggregate the surviving issues.

    Unreadable files and directories are recorded as read failures and
    skipped; they never abort the run or affect the exit code.
    """
    config = config or AuditConfig()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Scan root does not exist or is not a directory: {root}")

    started_at = time.perf_counter()
    rules = config.rule_index
    failures: list[ReadFailure] = []
    files: list[FileIssues] = []
    scanned = 0

    def _record_dir_error(path: Path, exc: OSError) -> None:
        failures.append(ReadFailure(path=_path_for_display(path, root), message=exc.strerror or str(exc)))

    for path in iter_text_files(root, config.exclude_dirs, config.extension_set, on_error=_record_dir_error):
        display_path = _path_for_display(path, root)
        scanned += 1
        try:
            issues = scan_file(path, config.tokens, rules, display_path=display_path)
        except FileReadError as exc:
            failures.append(ReadFailure(path=display_path, message=exc.reason))
            continue
        if issues:
            files.append(FileIssues(path=display_path, issues=tuple(issues)))

    duration = time.perf_counter() - started_at
    report = AuditReport(
        root=str(root),
        files=tuple(files),
        scanned_files=scanned,
        token_count=len(config.tokens),
        duration_seconds=duration,
        read_failures=tuple(failures),
    )
    logger.debug(
        "Audited %d files under %s: %d issues, %d read failures",
        scanned,
        root,
        report.total_issues,
        len(failures),
    )
    return report
