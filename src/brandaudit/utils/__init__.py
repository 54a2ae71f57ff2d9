"""Utility helpers shared across brandaudit modules."""

from .coerce import (
    ensure_bool,
    ensure_mapping,
    ensure_optional_int,
    ensure_string,
    ensure_string_list,
    ensure_string_mapping,
)

__all__ = [
    "ensure_bool",
    "ensure_mapping",
    "ensure_optional_int",
    "ensure_string",
    "ensure_string_list",
    "ensure_string_mapping",
]
