"""Report rendering for audit results."""

from .stdout import StdoutReporter, render_start_banner, truncate_preview

__all__ = ["StdoutReporter", "render_start_banner", "truncate_preview"]
