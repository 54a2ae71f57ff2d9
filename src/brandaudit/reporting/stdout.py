"""Human-readable stdout reporter for audit results."""

from __future__ import annotations

from brandaudit.constants.audit import PREVIEW_ELLIPSIS, PREVIEW_MAX_CHARS
from brandaudit.constants.branding import (
    AUDIT_START_TITLE,
    CLEAN_BANNER_LINES,
    REMEDIATION_STEPS,
    RESULTS_TITLE,
    RULE_WIDTH,
    TOOL_NAME,
)
from brandaudit.constants.reporting import ANSI_BOLD, ANSI_GREEN, ANSI_RED, ANSI_RESET, ANSI_YELLOW
from brandaudit.model import AuditIssue, AuditReport


def truncate_preview(content: str, limit: int = PREVIEW_MAX_CHARS) -> str:
    """Cut *content* to *limit* characters, marking the cut with an ellipsis."""
    if len(content) <= limit:
        return content
    return f"{content[:limit]}{PREVIEW_ELLIPSIS}"


def render_start_banner(root: str, token_count: int) -> str:
    """Render the lines printed before the walk begins."""
    lines = [
        f"{TOOL_NAME}: {AUDIT_START_TITLE}",
        f"Scanning directory: {root}",
        f"Looking for {token_count} brand tokens...",
        "",
    ]
    return "\n".join(lines)


class StdoutReporter:
    """Formats an :class:`AuditReport` for the terminal."""

    def __init__(self, report: AuditReport, *, color: bool = False, verbose: bool = False) -> None:
        self._report = report
        self._color = color
        self._verbose = verbose

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{ANSI_RESET}" if self._color else text

    def render(self) -> str:
        """Render the timing line and the results; the start banner is printed separately."""
        sections = [self._render_timing(), self._render_results()]
        return "\n".join(sections)

    def _render_timing(self) -> str:
        r = self._report
        line = f"Audit completed in {r.duration_ms}ms"
        if self._verbose:
            line += f" ({r.scanned_files} files scanned, {len(r.read_failures)} unreadable)"
        return line

    def _render_results(self) -> str:
        r = self._report
        rule = "=" * RULE_WIDTH
        lines = ["", self._paint(f"{TOOL_NAME}: {RESULTS_TITLE}", ANSI_BOLD), "", rule]

        if r.is_clean:
            lines.extend(self._paint(text, ANSI_GREEN) for text in CLEAN_BANNER_LINES)
            return "\n".join(lines)

        summary = f"Found {r.total_issues} brand issues across {len(r.files)} files:"
        lines.append(self._paint(summary, ANSI_RED))
        lines.append("")

        for entry in r.files:
            lines.append(self._paint(entry.path, ANSI_YELLOW))
            for issue in entry.issues:
                lines.extend(self._render_issue(issue))
            lines.append("")

        lines.append(rule)
        lines.append("To fix these issues:")
        lines.extend(f"   {index}. {step}" for index, step in enumerate(REMEDIATION_STEPS, start=1))
        lines.append("")
        return "\n".join(lines)

    def _render_issue(self, issue: AuditIssue) -> list[str]:
        lines = [
            f'   Line {issue.line}: "{issue.token}"',
            f"   Content: {truncate_preview(issue.content)}",
        ]
        if issue.replacement:
            lines.append(f'   Replace with: "{issue.replacement}"')
        return lines
