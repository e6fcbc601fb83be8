"""
Integrity validation components.
"""

from .integrity_validator import AuditReport, IntegrityIssue, IntegrityValidator, IssueType

__all__ = ['AuditReport', 'IntegrityIssue', 'IntegrityValidator', 'IssueType']
