"""Immutable brand record and its derived display helpers.

Rendering code receives a :class:`BrandRecord` explicitly instead of
importing a global, so several brand profiles (preview, staging) can be
used side by side in one process.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from urllib.parse import quote

from brandaudit.constants.brand import (
    DEFAULT_PROTOCOL,
    PHONE_CONTEXT_DISPLAY,
    PHONE_CONTEXT_PLAIN,
    PHONE_CONTEXT_TEL,
    REQUIRED_BRAND_FIELDS,
    SERVICE_AREA_SEPARATOR,
)

logger = logging.getLogger(__name__)

_NON_DIGIT_PATTERN = re.compile(r"\D")
# encodeURIComponent leaves these unescaped in addition to quote()'s defaults
_MAILTO_SAFE_CHARS = "!~*'()"


@dataclass(frozen=True)
class ServiceCatalog:
    """Service labels shown across the site."""

    primary: tuple[str, ...] = ()
    categories: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class BusinessInfo:
    """Descriptive business facts; unknown values stay ``None``."""

    founded: int | None = None
    years_in_business: int | None = None
    service_radius: str = ""
    emergency_service: bool = False
    licensed: bool = False
    insured: bool = False


@dataclass(frozen=True)
class SeoMetadata:
    """Default page metadata."""

    default_title: str = ""
    default_description: str = ""
    keywords: tuple[str, ...] = ()
    locale: str = ""
    region: str = ""
    placename: str = ""


@dataclass(frozen=True)
class BrandRecord:
    """Authoritative set of current-brand values."""

    company_name: str = ""
    short_name: str = ""
    legal_name: str = ""
    tagline: str = ""
    primary_domain: str = ""
    alt_domains: tuple[str, ...] = ()
    primary_phone_display: str = ""
    primary_phone_dial: str = ""
    primary_email: str = ""
    service_area: tuple[str, ...] = ()
    primary_location: str = ""
    address_lines: tuple[str, ...] = ()
    colours: dict[str, str] = field(default_factory=dict)
    logo_paths: dict[str, str] = field(default_factory=dict)
    social: dict[str, str] = field(default_factory=dict)
    services: ServiceCatalog = ServiceCatalog()
    business_info: BusinessInfo = BusinessInfo()
    seo: SeoMetadata = SeoMetadata()

    def format_phone(self, context: str = PHONE_CONTEXT_DISPLAY) -> str:
        """Return the phone number formatted for ``tel``, ``display`` or ``plain`` use.

        Unrecognised contexts fall back to the display form.
        """
        if context == PHONE_CONTEXT_TEL:
            return self.primary_phone_dial
        if context == PHONE_CONTEXT_PLAIN:
            return _NON_DIGIT_PATTERN.sub("", self.primary_phone_display)
        return self.primary_phone_display

    def full_legal_name(self) -> str:
        return self.legal_name

    def service_area_string(self) -> str:
        return SERVICE_AREA_SEPARATOR.join(self.service_area)

    def full_domain(self, protocol: str = DEFAULT_PROTOCOL) -> str:
        return f"{protocol}://{self.primary_domain}"

    def mailto_link(self, subject: str = "") -> str:
        """Build a ``mailto:`` URI for the primary email, with an optional subject."""
        subject_param = f"?subject={quote(subject, safe=_MAILTO_SAFE_CHARS)}" if subject else ""
        return f"mailto:{self.primary_email}{subject_param}"

    def missing_required_fields(self) -> tuple[str, ...]:
        """Return the names of required fields that are empty or unset."""
        return tuple(name for name in REQUIRED_BRAND_FIELDS if not getattr(self, name))

    def validate(self) -> bool:
        """Check required fields are present, logging a warning listing any that are missing."""
        missing = self.missing_required_fields()
        if not missing:
            return True
        labels = [f"{REQUIRED_BRAND_FIELDS[name]} is required ({name})" for name in missing]
        logger.warning("Brand configuration incomplete: %s", "; ".join(labels))
        return False


def brand_context(record: BrandRecord) -> dict[str, str]:
    """Flatten the display values a template layer needs into plain strings."""
    return {
        "company_name": record.company_name,
        "short_name": record.short_name,
        "legal_name": record.full_legal_name(),
        "tagline": record.tagline,
        "phone_display": record.format_phone("display"),
        "phone_tel": record.format_phone("tel"),
        "phone_plain": record.format_phone("plain"),
        "email": record.primary_email,
        "mailto": record.mailto_link(),
        "site_url": record.full_domain(),
        "service_area": record.service_area_string(),
        "primary_location": record.primary_location,
    }
