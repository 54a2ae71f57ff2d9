"""Config loading and normalization for brand audits."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from brandaudit.audit import FalsePositiveRule, LegacyToken
from brandaudit.brand import brand_from_mapping
from brandaudit.config.model import AuditConfig
from brandaudit.constants.audit import DEFAULT_EXCLUDE_DIRS, DEFAULT_SCAN_EXTENSIONS
from brandaudit.constants.config import CONFIG_FILENAME
from brandaudit.exceptions import ConfigError
from brandaudit.utils import ensure_string, ensure_string_list


def load_config(root: Path, config_path: Path | None = None) -> AuditConfig:
    """Load audit config from ``brandaudit.yaml`` or an explicit path.

    Keys that are absent keep their built-in defaults.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return AuditConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    defaults = AuditConfig()
    tokens = _parse_tokens(raw["legacy_tokens"]) if "legacy_tokens" in raw else defaults.tokens
    rules = _parse_rules(raw["false_positive_rules"]) if "false_positive_rules" in raw else defaults.rules

    exclude_dirs = tuple(
        name.strip()
        for name in ensure_string_list(raw.get("exclude_dirs", list(DEFAULT_EXCLUDE_DIRS)), "exclude_dirs")
        if name.strip()
    )
    scan_extensions = tuple(
        _normalize_extension(ext)
        for ext in ensure_string_list(raw.get("scan_extensions", list(DEFAULT_SCAN_EXTENSIONS)), "scan_extensions")
        if ext.strip()
    )

    brand = brand_from_mapping(raw["brand"]) if raw.get("brand") is not None else defaults.brand

    return AuditConfig(
        tokens=tokens,
        rules=rules,
        exclude_dirs=exclude_dirs,
        scan_extensions=scan_extensions,
        brand=brand,
    )


def _normalize_extension(ext: str) -> str:
    """Lowercase and ensure a leading dot: ``HTML`` -> ``.html``."""
    normalized = ext.strip().lower()
    return normalized if normalized.startswith(".") else f".{normalized}"


def _parse_tokens(value: Any) -> tuple[LegacyToken, ...]:
    """Parse ``legacy_tokens`` entries given as strings or ``{token, replacement}`` mappings."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("legacy_tokens must be a list")

    tokens: list[LegacyToken] = []
    for index, item in enumerate(value):
        key_name = f"legacy_tokens[{index}]"
        if isinstance(item, str):
            token, replacement = item, None
        elif isinstance(item, dict):
            token = ensure_string(item.get("token"), f"{key_name}.token")
            replacement = ensure_string(item.get("replacement"), f"{key_name}.replacement") or None
        else:
            raise ConfigError(f"{key_name} must be a string or a mapping with a token key")
        if not token.strip():
            raise ConfigError(f"{key_name} must not be empty")
        tokens.append(LegacyToken(token=token, replacement=replacement))
    return tuple(tokens)


def _parse_rules(value: Any) -> tuple[FalsePositiveRule, ...]:
    """Parse ``false_positive_rules`` entries of ``{token, unless_line_contains}``."""
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("false_positive_rules must be a list")

    rules: list[FalsePositiveRule] = []
    for index, item in enumerate(value):
        key_name = f"false_positive_rules[{index}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{key_name} must be a mapping")
        token = ensure_string(item.get("token"), f"{key_name}.token")
        if not token.strip():
            raise ConfigError(f"{key_name}.token must not be empty")
        phrases = ensure_string_list(item.get("unless_line_contains"), f"{key_name}.unless_line_contains")
        rules.append(FalsePositiveRule(token=token, disambiguating_phrases=tuple(p for p in phrases if p.strip())))
    return tuple(rules)
