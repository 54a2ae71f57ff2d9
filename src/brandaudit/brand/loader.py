"""Build brand records from YAML mappings."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any, Callable

import yaml

from brandaudit.brand.defaults import DEFAULT_BRAND
from brandaudit.brand.record import BrandRecord
from brandaudit.exceptions import ConfigError
from brandaudit.utils import (
    ensure_bool,
    ensure_mapping,
    ensure_optional_int,
    ensure_string,
    ensure_string_list,
    ensure_string_mapping,
)


def _as_tuple(value: Any, key_name: str) -> tuple[str, ...]:
    return tuple(ensure_string_list(value, key_name))


_SCALAR_FIELDS: dict[str, Callable[[Any, str], Any]] = {
    "company_name": ensure_string,
    "short_name": ensure_string,
    "legal_name": ensure_string,
    "tagline": ensure_string,
    "primary_domain": ensure_string,
    "alt_domains": _as_tuple,
    "primary_phone_display": ensure_string,
    "primary_phone_dial": ensure_string,
    "primary_email": ensure_string,
    "service_area": _as_tuple,
    "primary_location": ensure_string,
    "address_lines": _as_tuple,
    "colours": ensure_string_mapping,
    "logo_paths": ensure_string_mapping,
    "social": ensure_string_mapping,
}

_SERVICE_FIELDS: dict[str, Callable[[Any, str], Any]] = {
    "primary": _as_tuple,
    "categories": ensure_string_mapping,
}

_BUSINESS_FIELDS: dict[str, Callable[[Any, str], Any]] = {
    "founded": ensure_optional_int,
    "years_in_business": ensure_optional_int,
    "service_radius": ensure_string,
    "emergency_service": ensure_bool,
    "licensed": ensure_bool,
    "insured": ensure_bool,
}

_SEO_FIELDS: dict[str, Callable[[Any, str], Any]] = {
    "default_title": ensure_string,
    "default_description": ensure_string,
    "keywords": _as_tuple,
    "locale": ensure_string,
    "region": ensure_string,
    "placename": ensure_string,
}

BRAND_KEYS: frozenset[str] = frozenset(_SCALAR_FIELDS) | {"services", "business_info", "seo"}


def _coerce_fields(
    raw: dict[Any, Any],
    fields: dict[str, Callable[[Any, str], Any]],
    prefix: str,
) -> dict[str, Any]:
    non_string = [key for key in raw if not isinstance(key, str)]
    if non_string:
        raise ConfigError(f"{prefix} keys must be strings, got {', '.join(repr(key) for key in non_string)}")
    unknown = sorted(set(raw) - set(fields))
    if unknown:
        raise ConfigError(f"{prefix} has unknown key(s): {', '.join(unknown)}")
    return {key: fields[key](value, f"{prefix}.{key}") for key, value in raw.items()}


def brand_from_mapping(raw: Any, base: BrandRecord = DEFAULT_BRAND) -> BrandRecord:
    """Return *base* with every key present in *raw* overridden.

    Nested groups (``services``, ``business_info``, ``seo``) are merged key by
    key, so a mapping only needs to name the values that differ.
    """
    data = dict(ensure_mapping(raw, "brand"))
    nested = {key: data.pop(key) for key in ("services", "business_info", "seo") if key in data}
    overrides = _coerce_fields(data, _SCALAR_FIELDS, "brand")

    if "services" in nested:
        services_raw = ensure_mapping(nested["services"], "brand.services")
        overrides["services"] = replace(
            base.services, **_coerce_fields(services_raw, _SERVICE_FIELDS, "brand.services")
        )
    if "business_info" in nested:
        business_raw = ensure_mapping(nested["business_info"], "brand.business_info")
        overrides["business_info"] = replace(
            base.business_info, **_coerce_fields(business_raw, _BUSINESS_FIELDS, "brand.business_info")
        )
    if "seo" in nested:
        seo_raw = ensure_mapping(nested["seo"], "brand.seo")
        overrides["seo"] = replace(base.seo, **_coerce_fields(seo_raw, _SEO_FIELDS, "brand.seo"))

    return replace(base, **overrides)


def load_brand(path: Path, base: BrandRecord = DEFAULT_BRAND) -> BrandRecord:
    """Load a brand profile from a standalone YAML file."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read brand file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML brand file at {path}: {exc}") from exc
    return brand_from_mapping(raw, base)
