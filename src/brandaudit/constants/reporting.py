"""Constants for stdout formatting."""

from __future__ import annotations

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_BOLD: str = "\033[1m"
ANSI_RESET: str = "\033[0m"
