"""Base exception for brandaudit."""

from __future__ import annotations


class BrandAuditError(Exception):
    """Base class for all brandaudit errors."""
