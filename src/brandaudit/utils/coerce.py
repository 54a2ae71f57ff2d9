"""Type coercion for values loaded from YAML, raising ConfigError on mismatch."""

from __future__ import annotations

from typing import Any

from brandaudit.exceptions import ConfigError


def ensure_string(value: Any, key_name: str) -> str:
    """Return *value* as a string, treating ``None`` as empty."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value


def ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key_name} must be a mapping")
    return value


def ensure_string_mapping(value: Any, key_name: str) -> dict[str, str]:
    """Coerce a value to a ``str -> str`` mapping; ``None`` values become empty strings."""
    raw = ensure_mapping(value, key_name)
    result: dict[str, str] = {}
    for key, item in raw.items():
        if not isinstance(key, str):
            raise ConfigError(f"{key_name} keys must be strings")
        result[key] = ensure_string(item, f"{key_name}.{key}")
    return result


def ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def ensure_optional_int(value: Any, key_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key_name} must be an integer or null")
    return value
