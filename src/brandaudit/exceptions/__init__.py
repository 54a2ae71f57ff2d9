"""Shared exception hierarchy for brandaudit."""

from __future__ import annotations

from .base import BrandAuditError
from .config import ConfigError
from .scanning import FileReadError

__all__ = [
    "BrandAuditError",
    "ConfigError",
    "FileReadError",
]
