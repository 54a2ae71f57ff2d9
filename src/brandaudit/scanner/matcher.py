"""Line-by-line legacy token matching."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from brandaudit.audit import FalsePositiveRule, LegacyToken, is_false_positive
from brandaudit.exceptions import FileReadError
from brandaudit.model import AuditIssue

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def find_spans(lower_line: str, needle: str) -> list[Span]:
    """Return every (possibly overlapping) occurrence of *needle* as ``(start, end)``."""
    spans: list[Span] = []
    start = lower_line.find(needle)
    while start != -1:
        spans.append((start, start + len(needle)))
        start = lower_line.find(needle, start + 1)
    return spans


def suppress_redundant_tokens(hits: list[tuple[LegacyToken, list[Span]]]) -> list[LegacyToken]:
    """Drop hits whose every occurrence lies inside a longer hit on the same line.

    ``islanddrainsandexcavation.ca`` also contains ``islanddrainsandexcavation``;
    only the longer token is reported for that occurrence.

    This intentionally differs from the JavaScript brand-audit script, which
    reported every token a line contained: a line holding the legacy email
    address produced three issues (email, domain and bare name). Here it
    produces one, for the email token.
    """
    kept: list[LegacyToken] = []
    for legacy, spans in hits:
        covering = [
            span
            for other, other_spans in hits
            if len(other.needle) > len(legacy.needle)
            for span in other_spans
        ]
        covered = all(any(c_start <= start and end <= c_end for c_start, c_end in covering) for start, end in spans)
        if not covered:
            kept.append(legacy)
    return kept


def scan_lines(
    path: str,
    text: str,
    tokens: Sequence[LegacyToken],
    rules: Mapping[str, FalsePositiveRule],
) -> list[AuditIssue]:
    """Return the legacy-token issues found in *text*.

    Matching is case-insensitive substring containment, one line at a time.
    Issues are ordered by line number, then by token order.
    """
    issues: list[AuditIssue] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        lower_line = line.lower()
        hits: list[tuple[LegacyToken, list[Span]]] = []
        for legacy in tokens:
            spans = find_spans(lower_line, legacy.needle)
            if not spans or is_false_positive(line, legacy.token, rules):
                continue
            hits.append((legacy, spans))
        if not hits:
            continue
        content = line.strip()
        for legacy in suppress_redundant_tokens(hits):
            issues.append(
                AuditIssue(
                    path=path,
                    line=line_number,
                    token=legacy.token,
                    content=content,
                    replacement=legacy.replacement,
                )
            )
    return issues


def read_text(path: Path) -> str:
    """Read *path* as UTF-8, raising FileReadError for unreadable or non-text files.

    Newlines are left untranslated so that only ``\\n`` ends a line; a lone
    ``\\r`` stays inside the line it appears in.
    """
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        logger.error("Error reading file %s: not valid UTF-8 text (%s)", path, exc.reason)
        raise FileReadError(path, f"not valid UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        logger.error("Error reading file %s: %s", path, reason)
        raise FileReadError(path, reason) from exc


def scan_file(
    path: Path,
    tokens: Sequence[LegacyToken],
    rules: Mapping[str, FalsePositiveRule],
    *,
    display_path: str | None = None,
) -> list[AuditIssue]:
    """Read and scan one file; *display_path* is the path recorded on each issue."""
    text = read_text(path)
    return scan_lines(display_path or str(path), text, tokens, rules)
