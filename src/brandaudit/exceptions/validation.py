"""Config problems collected by ``validate-config`` and the audit preflight."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One problem in a config file, addressed by its dotted field path."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    @property
    def location(self) -> str:
        """``path:field``, or just the path for whole-file problems."""
        return f"{self.path}:{self.field}" if self.field else self.path

    def format(self) -> str:
        line = f"{self.code} {self.location}: {self.message}"
        return f"{line} ({self.hint})" if self.hint else line


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Render one line per problem, ordered by file, code and field, then a count line."""
    ordered = sorted(errors, key=lambda e: (e.path, e.code, e.field))
    lines = [e.format() for e in ordered]
    lines.append(f"{len(ordered)} configuration problem(s) found.")
    return "\n".join(lines)
