"""Default legacy-token tables and traversal filters for the brand audit."""

from __future__ import annotations

DEFAULT_LEGACY_TOKENS: tuple[str, ...] = (
    # company names
    "island drains & excavation",
    "island drains and excavation",
    "islanddrainsandexcavation",
    # contact info
    "818-5611",
    "2508185611",
    "+12508185611",
    "info@islanddrainsandexcavation.ca",
    # domain
    "islanddrainsandexcavation.ca",
    # colours
    "#0C4A6E",
    "#FCD34D",
    "#0369A1",
    # service areas
    "victoria & southern vancouver island",
    "southern vancouver island",
    # services
    "lift station supply & install",
    "perimeter drains",
    "structure demolition",
)

DEFAULT_EXCLUDE_WORDS: tuple[str, ...] = (
    "drainage",
    "drain",
    "victoria",
    "ide",
    "island",
    "drains",
)

DEFAULT_DISAMBIGUATING_PHRASES: tuple[str, ...] = (
    "island drains",
    "islanddrainsandexcavation",
    "victoria & southern vancouver island",
)

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    ".git",
    "node_modules",
    ".idea",
    ".vscode",
    "dist",
    "build",
)

DEFAULT_SCAN_EXTENSIONS: tuple[str, ...] = (
    ".html",
    ".css",
    ".js",
    ".json",
    ".md",
    ".txt",
    ".xml",
)

PREVIEW_MAX_CHARS: int = 80
PREVIEW_ELLIPSIS: str = "..."
