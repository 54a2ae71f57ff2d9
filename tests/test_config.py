"""Tests for audit configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from brandaudit.audit import DEFAULT_RULES, DEFAULT_TOKENS, FalsePositiveRule, LegacyToken
from brandaudit.brand import DEFAULT_BRAND
from brandaudit.config import AuditConfig, load_config
from brandaudit.constants.audit import DEFAULT_EXCLUDE_DIRS, DEFAULT_SCAN_EXTENSIONS
from brandaudit.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path)

    assert loaded == AuditConfig()
    assert loaded.tokens == DEFAULT_TOKENS
    assert loaded.rules == DEFAULT_RULES
    assert loaded.exclude_dirs == DEFAULT_EXCLUDE_DIRS
    assert loaded.scan_extensions == DEFAULT_SCAN_EXTENSIONS
    assert loaded.brand is DEFAULT_BRAND


def test_empty_file_keeps_defaults(tmp_path: Path) -> None:
    (tmp_path / "brandaudit.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == AuditConfig()


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "other.yaml")


def test_migration_manifest_tokens(tmp_path: Path) -> None:
    (tmp_path / "brandaudit.yaml").write_text(
        "legacy_tokens:\n"
        "  - old co\n"
        "  - token: '#0C4A6E'\n"
        "    replacement: '#265D2D'\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.tokens == (LegacyToken("old co"), LegacyToken("#0C4A6E", replacement="#265D2D"))
    assert loaded.rules == DEFAULT_RULES


def test_false_positive_rules(tmp_path: Path) -> None:
    (tmp_path / "brandaudit.yaml").write_text(
        "false_positive_rules:\n  - token: Basin\n    unless_line_contains: [old basin co]\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path)

    assert loaded.rules == (FalsePositiveRule("Basin", ("old basin co",)),)
    assert set(loaded.rule_index) == {"basin"}


def test_extensions_are_normalized(tmp_path: Path) -> None:
    (tmp_path / "brandaudit.yaml").write_text("scan_extensions: [HTML, .Vue, '  ']\n", encoding="utf-8")

    loaded = load_config(tmp_path)

    assert loaded.scan_extensions == (".html", ".vue")
    assert loaded.extension_set == frozenset({".html", ".vue"})


def test_brand_section_overrides_default(tmp_path: Path) -> None:
    (tmp_path / "brandaudit.yaml").write_text("brand:\n  company_name: Preview Co\n", encoding="utf-8")

    loaded = load_config(tmp_path)

    assert loaded.brand.company_name == "Preview Co"
    assert loaded.brand.primary_domain == DEFAULT_BRAND.primary_domain


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("- a\n- b\n", "YAML mapping"),
        ("legacy_tokens: nope\n", "legacy_tokens"),
        ("legacy_tokens: ['']\n", r"legacy_tokens\[0\]"),
        ("legacy_tokens: [{replacement: x}]\n", r"legacy_tokens\[0\]"),
        ("false_positive_rules: [drain]\n", r"false_positive_rules\[0\]"),
        ("exclude_dirs: .git\n", "exclude_dirs"),
        ("brand: {primary_email: 3}\n", "brand.primary_email"),
        ("legacy_tokens: [\n", "Invalid YAML"),
    ],
    ids=["not_mapping", "tokens_scalar", "empty_token", "token_missing", "rule_scalar", "dirs_scalar", "brand", "yaml"],
)
def test_invalid_config_raises(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    (tmp_path / "brandaudit.yaml").write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_config(tmp_path)
