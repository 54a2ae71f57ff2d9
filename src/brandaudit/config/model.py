"""Config data model for brand audits."""

from __future__ import annotations

from dataclasses import dataclass

from brandaudit.audit import DEFAULT_RULES, DEFAULT_TOKENS, FalsePositiveRule, LegacyToken, build_rule_index
from brandaudit.brand import DEFAULT_BRAND, BrandRecord
from brandaudit.constants.audit import DEFAULT_EXCLUDE_DIRS, DEFAULT_SCAN_EXTENSIONS


@dataclass(frozen=True)
class AuditConfig:
    """Resolved audit config: what to look for, where, and the current brand."""

    tokens: tuple[LegacyToken, ...] = DEFAULT_TOKENS
    rules: tuple[FalsePositiveRule, ...] = DEFAULT_RULES
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    scan_extensions: tuple[str, ...] = DEFAULT_SCAN_EXTENSIONS
    brand: BrandRecord = DEFAULT_BRAND

    @property
    def rule_index(self) -> dict[str, FalsePositiveRule]:
        return build_rule_index(self.rules)

    @property
    def extension_set(self) -> frozenset[str]:
        return frozenset(ext.lower() for ext in self.scan_extensions)
