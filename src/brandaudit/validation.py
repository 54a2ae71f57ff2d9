"""Preflight validation shared by ``brandaudit validate-config`` and ``brandaudit audit``."""

from __future__ import annotations

from pathlib import Path

from brandaudit.config import validate_config_file
from brandaudit.constants.validation import CFG006
from brandaudit.exceptions.validation import ValidationError


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Check the scan root, then the config file, in the order problems are found.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG006,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    return validate_config_file(root, config_path, config_explicit=config_path is not None)
