"""Branding constants for terminal output."""

from __future__ import annotations

TOOL_NAME: str = "BRANDAUDIT"
CLI_DESCRIPTION: str = f"{TOOL_NAME}: scan a site tree for leftover legacy brand references"

AUDIT_START_TITLE: str = "Starting brand audit..."
RESULTS_TITLE: str = "Brand Audit Results"
RULE_WIDTH: int = 60

CLEAN_BANNER_LINES: tuple[str, ...] = (
    "No brand issues found! The transformation is complete.",
    "All Island Drains references have been successfully updated to Jaden's Excavation & Landscaping.",
)

REMEDIATION_STEPS: tuple[str, ...] = (
    "Update the identified files with correct Jaden's Excavation branding",
    "Replace old contact information with new details",
    "Update service areas to Metro Vancouver",
    "Replace old color codes with new brand colors",
    "Run this audit again to verify fixes",
)
