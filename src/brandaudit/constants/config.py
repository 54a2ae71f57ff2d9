"""Configuration defaults, filenames and allowed keys."""

from __future__ import annotations

CONFIG_FILENAME: str = "brandaudit.yaml"

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "legacy_tokens",
        "false_positive_rules",
        "exclude_dirs",
        "scan_extensions",
        "brand",
    }
)
ALLOWED_TOKEN_KEYS: frozenset[str] = frozenset({"token", "replacement"})
ALLOWED_RULE_KEYS: frozenset[str] = frozenset({"token", "unless_line_contains"})
LIST_OF_STRINGS_KEYS: frozenset[str] = frozenset({"exclude_dirs", "scan_extensions"})
