"""Legacy-token and false-positive rule tables."""

from __future__ import annotations

from .rules import (
    DEFAULT_RULES,
    DEFAULT_TOKENS,
    FalsePositiveRule,
    LegacyToken,
    build_rule_index,
    is_false_positive,
)

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_TOKENS",
    "FalsePositiveRule",
    "LegacyToken",
    "build_rule_index",
    "is_false_positive",
]
