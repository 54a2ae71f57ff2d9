"""Tests for collect-all config validation and preflight checks."""

from __future__ import annotations

from pathlib import Path

from brandaudit.config import validate_config_file
from brandaudit.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from brandaudit.exceptions.validation import ValidationError, format_errors
from brandaudit.validation import preflight_validate


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "brandaudit.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_implicit_config_is_fine(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "x.yaml", config_explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_invalid_yaml(tmp_path: Path) -> None:
    _write(tmp_path, "a: [\n")

    assert [e.code for e in validate_config_file(tmp_path)] == [CFG002]


def test_non_mapping(tmp_path: Path) -> None:
    _write(tmp_path, "- one\n")

    assert [e.code for e in validate_config_file(tmp_path)] == [CFG003]


def test_unknown_key_suggests_closest(tmp_path: Path) -> None:
    _write(tmp_path, "legacy_token: [a]\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG004
    assert error.field == "legacy_token"
    assert "legacy_tokens" in error.hint


def test_collects_every_problem(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "exclude_dirs: 5\n"
        "scan_extensions: [.html]\n"
        "legacy_tokens:\n"
        "  - ok\n"
        "  - {token: '', colour: x}\n"
        "false_positive_rules:\n"
        "  - {token: drain, unless_line_contains: island}\n"
        "brand:\n"
        "  company_nme: x\n",
    )

    errors = validate_config_file(tmp_path)
    fields = {(e.code, e.field) for e in errors}

    assert (CFG005, "exclude_dirs") in fields
    assert (CFG004, "legacy_tokens[1].colour") in fields
    assert (CFG005, "legacy_tokens[1].token") in fields
    assert (CFG005, "false_positive_rules[0].unless_line_contains") in fields
    assert (CFG004, "brand.company_nme") in fields
    assert all(e.field != "scan_extensions" for e in errors)


def test_brand_type_errors_are_reported(tmp_path: Path) -> None:
    _write(tmp_path, "brand:\n  seo:\n    keywords: excavation\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG005
    assert "brand.seo.keywords" in error.message


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "legacy_tokens:\n"
        "  - island drains\n"
        "  - {token: '818-5611', replacement: '555-0199'}\n"
        "false_positive_rules:\n"
        "  - {token: drains, unless_line_contains: [island drains]}\n"
        "exclude_dirs: [.git]\n"
        "brand:\n"
        "  company_name: Jaden's\n",
    )

    assert validate_config_file(tmp_path) == []


def test_preflight_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "absent")

    assert [e.code for e in errors] == [CFG006]


def test_mixed_key_types_in_brand_group_are_reported(tmp_path: Path) -> None:
    _write(tmp_path, "brand:\n  seo:\n    1: a\n    foo: b\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG005
    assert error.field == "brand"
    assert "keys must be strings" in error.message


def test_non_string_top_level_brand_key_is_unknown(tmp_path: Path) -> None:
    _write(tmp_path, "brand:\n  1: a\n  company_name: x\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG004
    assert error.field == "brand.1"


def test_error_format_names_field_and_hint() -> None:
    error = ValidationError(
        code=CFG004,
        path="site/brandaudit.yaml",
        field="legacy_tokns",
        message="unknown key: legacy_tokns",
        hint="Did you mean 'legacy_tokens'?",
    )

    assert error.format() == (
        "CFG004 site/brandaudit.yaml:legacy_tokns: unknown key: legacy_tokns (Did you mean 'legacy_tokens'?)"
    )


def test_whole_file_error_has_no_field_suffix() -> None:
    error = ValidationError(code=CFG002, path="brandaudit.yaml", field="", message="invalid YAML")

    assert error.location == "brandaudit.yaml"
    assert error.format() == "CFG002 brandaudit.yaml: invalid YAML"


def test_format_errors_orders_by_code_and_counts(tmp_path: Path) -> None:
    _write(tmp_path, "exclude_dirs: nope\nlegacy_tokns: []\n")

    lines = format_errors(validate_config_file(tmp_path)).splitlines()

    assert [line.split()[0] for line in lines[:-1]] == [CFG004, CFG005]
    assert lines[-1] == "2 configuration problem(s) found."
