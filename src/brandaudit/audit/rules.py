"""Legacy tokens and the false-positive rule table.

A :class:`FalsePositiveRule` pairs a generic word with the longer phrases
that prove a line really refers to the legacy brand. A match on the generic
word is discarded unless one of those phrases appears on the same line.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from brandaudit.constants.audit import (
    DEFAULT_DISAMBIGUATING_PHRASES,
    DEFAULT_EXCLUDE_WORDS,
    DEFAULT_LEGACY_TOKENS,
)


@dataclass(frozen=True)
class LegacyToken:
    """A legacy brand string, optionally mapped to its current-brand replacement."""

    token: str
    replacement: str | None = None

    @property
    def needle(self) -> str:
        return self.token.lower()


@dataclass(frozen=True)
class FalsePositiveRule:
    """Generic token that only counts when a disambiguating phrase shares its line."""

    token: str
    disambiguating_phrases: tuple[str, ...]

    def suppresses(self, line: str) -> bool:
        lower_line = line.lower()
        return not any(phrase.lower() in lower_line for phrase in self.disambiguating_phrases)


DEFAULT_TOKENS: tuple[LegacyToken, ...] = tuple(LegacyToken(token) for token in DEFAULT_LEGACY_TOKENS)

DEFAULT_RULES: tuple[FalsePositiveRule, ...] = tuple(
    FalsePositiveRule(word, DEFAULT_DISAMBIGUATING_PHRASES) for word in DEFAULT_EXCLUDE_WORDS
)


def build_rule_index(rules: Iterable[FalsePositiveRule]) -> dict[str, FalsePositiveRule]:
    """Index rules by lowercased token; later rules replace earlier ones."""
    return {rule.token.lower(): rule for rule in rules}


def is_false_positive(line: str, token: str, rules: Mapping[str, FalsePositiveRule]) -> bool:
    """Return True when a match of *token* on *line* should be discarded."""
    rule = rules.get(token.lower())
    if rule is None:
        return False
    return rule.suppresses(line)
