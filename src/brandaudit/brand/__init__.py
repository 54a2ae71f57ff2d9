"""Brand record, defaults and YAML loading."""

from __future__ import annotations

from .defaults import DEFAULT_BRAND
from .loader import brand_from_mapping, load_brand
from .record import BrandRecord, BusinessInfo, SeoMetadata, ServiceCatalog, brand_context

__all__ = [
    "DEFAULT_BRAND",
    "BrandRecord",
    "BusinessInfo",
    "SeoMetadata",
    "ServiceCatalog",
    "brand_context",
    "brand_from_mapping",
    "load_brand",
]
