"""Configuration-related exceptions."""

from __future__ import annotations

from brandaudit.exceptions.base import BrandAuditError


class ConfigError(BrandAuditError, ValueError):
    """Raised when audit or brand configuration is invalid."""
