"""Shared pytest fixtures for building throwaway site trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper that writes ``{relative_path: text}`` under a fresh site root."""
    root = tmp_path / "site"
    root.mkdir()

    def _write(files: dict[str, str]) -> Path:
        for relative, text in files.items():
            target = root / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        return root

    return _write


@pytest.fixture
def current_brand_page() -> str:
    """HTML that only uses the current brand values."""
    return (
        "<html>\n"
        "<head><title>Jaden's Excavation & Landscaping</title></head>\n"
        "<body>\n"
        '  <a href="tel:+12505550199">(250) 555-0199</a>\n'
        '  <a href="mailto:info@jadensexcavation.ca">Email us</a>\n'
        "  <p>Serving Metro Vancouver & Greater Vancouver Area. Drainage and drains done right.</p>\n"
        "</body>\n"
        "</html>\n"
    )
