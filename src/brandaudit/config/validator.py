"""Config file validation for brand audits."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from brandaudit.brand import brand_from_mapping
from brandaudit.brand.loader import BRAND_KEYS
from brandaudit.constants.config import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_RULE_KEYS,
    ALLOWED_TOKEN_KEYS,
    CONFIG_FILENAME,
    LIST_OF_STRINGS_KEYS,
)
from brandaudit.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005
from brandaudit.exceptions import ConfigError
from brandaudit.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a brandaudit.yaml file and return all validation errors.

    Unlike :func:`brandaudit.config.load_config` this never raises; every
    problem found is returned so a single run can report them together.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in sorted(LIST_OF_STRINGS_KEYS):
        if key in raw and not _is_string_list(raw[key]):
            errors.append(_type_error(path_str, key, "a list of strings", raw[key]))

    if "legacy_tokens" in raw:
        errors.extend(_validate_entries(path_str, "legacy_tokens", raw["legacy_tokens"], ALLOWED_TOKEN_KEYS))
    if "false_positive_rules" in raw:
        errors.extend(
            _validate_entries(path_str, "false_positive_rules", raw["false_positive_rules"], ALLOWED_RULE_KEYS)
        )
    if raw.get("brand") is not None:
        errors.extend(_validate_brand(path_str, raw["brand"]))

    return errors


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint for an unknown key, or empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _type_error(path_str: str, field: str, expected: str, value: Any) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"`{field}` must be {expected}",
        hint=f"got {type(value).__name__}",
    )


def _validate_entries(
    path_str: str,
    key: str,
    value: Any,
    allowed_keys: frozenset[str],
) -> list[ValidationError]:
    """Validate ``legacy_tokens`` / ``false_positive_rules`` list entries."""
    if value is None:
        return []
    if not isinstance(value, list):
        return [_type_error(path_str, key, "a list", value)]

    errors: list[ValidationError] = []
    for index, item in enumerate(value):
        field = f"{key}[{index}]"
        if isinstance(item, str) and key == "legacy_tokens":
            if not item.strip():
                errors.append(ValidationError(code=CFG005, path=path_str, field=field, message="empty token"))
            continue
        if not isinstance(item, dict):
            errors.append(_type_error(path_str, field, "a mapping", item))
            continue
        for item_key in sorted(item.keys(), key=str):
            if item_key not in allowed_keys:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field}.{item_key}",
                        message=f"unknown key `{item_key}`",
                        hint=_suggest_key(str(item_key), allowed_keys),
                    )
                )
        token = item.get("token")
        if not isinstance(token, str) or not token.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.token",
                    message="`token` must be a non-empty string",
                )
            )
        phrases = item.get("unless_line_contains")
        if key == "false_positive_rules" and phrases is not None and not _is_string_list(phrases):
            errors.append(_type_error(path_str, f"{field}.unless_line_contains", "a list of strings", phrases))
        replacement = item.get("replacement")
        if replacement is not None and not isinstance(replacement, str):
            errors.append(_type_error(path_str, f"{field}.replacement", "a string", replacement))
    return errors


def _validate_brand(path_str: str, value: Any) -> list[ValidationError]:
    if not isinstance(value, dict):
        return [_type_error(path_str, "brand", "a mapping", value)]

    errors: list[ValidationError] = []
    for key in sorted(value.keys(), key=str):
        if key not in BRAND_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"brand.{key}",
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), BRAND_KEYS),
                )
            )
    if errors:
        return errors

    try:
        brand_from_mapping(value)
    except ConfigError as exc:
        errors.append(ValidationError(code=CFG005, path=path_str, field="brand", message=str(exc)))
    return errors
