"""Tests for the stdout audit reporter."""

from __future__ import annotations

from brandaudit.constants.branding import REMEDIATION_STEPS
from brandaudit.constants.reporting import ANSI_GREEN, ANSI_RED
from brandaudit.model import AuditIssue, AuditReport, FileIssues
from brandaudit.reporting.stdout import StdoutReporter, render_start_banner, truncate_preview


def _make_report(files: tuple[FileIssues, ...] = (), *, duration: float = 0.0421) -> AuditReport:
    return AuditReport(
        root="/srv/site",
        files=files,
        scanned_files=4,
        token_count=17,
        duration_seconds=duration,
    )


def _issue(line: int = 3, token: str = "818-5611", content: str = "Call 818-5611") -> AuditIssue:
    return AuditIssue(path="index.html", line=line, token=token, content=content)


def test_start_banner_names_root_and_token_count() -> None:
    banner = render_start_banner("/srv/site", 17)

    assert banner.splitlines()[1:3] == ["Scanning directory: /srv/site", "Looking for 17 brand tokens..."]


def test_render_starts_with_timing() -> None:
    output = StdoutReporter(_make_report()).render()

    assert output.startswith("Audit completed in 42ms")
    assert "Scanning directory" not in output


def test_clean_report_prints_success_banner() -> None:
    output = StdoutReporter(_make_report()).render()

    assert "No brand issues found! The transformation is complete." in output
    assert "To fix these issues:" not in output


def test_dirty_report_lists_issues_and_remediation() -> None:
    files = (
        FileIssues(path="index.html", issues=(_issue(), _issue(line=9, token="#0C4A6E", content="color: #0C4A6E"))),
        FileIssues(path="css/site.css", issues=(_issue(line=1),)),
    )

    output = StdoutReporter(_make_report(files)).render()

    assert "Found 3 brand issues across 2 files:" in output
    assert 'Line 3: "818-5611"' in output
    assert 'Line 9: "#0C4A6E"' in output
    assert "Content: color: #0C4A6E" in output
    assert output.index("index.html") < output.index("css/site.css")
    for step in REMEDIATION_STEPS:
        assert step in output


def test_long_content_is_truncated_to_80_chars() -> None:
    content = "x" * 120
    files = (FileIssues(path="a.md", issues=(_issue(content=content),)),)

    output = StdoutReporter(_make_report(files)).render()

    assert f"Content: {'x' * 80}..." in output
    assert "x" * 81 not in output


def test_truncate_preview_boundary() -> None:
    assert truncate_preview("y" * 80) == "y" * 80
    assert truncate_preview("y" * 81) == "y" * 80 + "..."


def test_replacement_hint_is_shown() -> None:
    issue = AuditIssue(path="a.css", line=1, token="#FCD34D", content="color: #FCD34D", replacement="#F9A825")
    files = (FileIssues(path="a.css", issues=(issue,)),)

    output = StdoutReporter(_make_report(files)).render()

    assert 'Replace with: "#F9A825"' in output


def test_color_only_when_requested() -> None:
    dirty = _make_report((FileIssues(path="a.md", issues=(_issue(),)),))

    assert ANSI_RED not in StdoutReporter(dirty).render()
    assert ANSI_RED in StdoutReporter(dirty, color=True).render()
    assert ANSI_GREEN in StdoutReporter(_make_report(), color=True).render()


def test_verbose_adds_scan_counts() -> None:
    output = StdoutReporter(_make_report(), verbose=True).render()

    assert "4 files scanned, 0 unreadable" in output
