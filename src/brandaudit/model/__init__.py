"""Core data models for brandaudit."""

from .entities import AuditIssue, AuditReport, FileIssues, ReadFailure

__all__ = [
    "AuditIssue",
    "AuditReport",
    "FileIssues",
    "ReadFailure",
]
