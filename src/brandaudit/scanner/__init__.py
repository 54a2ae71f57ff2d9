"""Scanner package: traversal, line matching and audit orchestration."""

from .orchestrator import audit_tree

__all__ = ["audit_tree"]
