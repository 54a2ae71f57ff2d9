"""Configuration loading and validation for brand audits."""

from __future__ import annotations

from brandaudit.config.loader import load_config
from brandaudit.config.model import AuditConfig
from brandaudit.config.validator import validate_config_file

__all__ = [
    "AuditConfig",
    "load_config",
    "validate_config_file",
]
