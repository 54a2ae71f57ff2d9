"""Required-field names and phone contexts for brand records."""

from __future__ import annotations

PHONE_CONTEXT_TEL: str = "tel"
PHONE_CONTEXT_DISPLAY: str = "display"
PHONE_CONTEXT_PLAIN: str = "plain"

DEFAULT_PROTOCOL: str = "https"
SERVICE_AREA_SEPARATOR: str = " & "

# field name -> label used in the incomplete-config warning
REQUIRED_BRAND_FIELDS: dict[str, str] = {
    "company_name": "Company name",
    "primary_phone_display": "Primary phone",
    "primary_email": "Primary email",
    "primary_domain": "Primary domain",
}
