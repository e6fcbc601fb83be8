"""
Structural validation for the administrative hierarchy.

This module provides code-format checks, parent-child relationship checks,
per-unit property checks and a whole-dataset integrity audit. The validator
only reports: it never raises on bad data and never repairs it.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from ..hierarchy.hierarchy_index import HierarchyIndex
from ..models import (
    AdministrativeUnit,
    CodeValidation,
    RelationshipValidation,
    UnitValidation,
)
from ..utils.data_utils import (
    detect_duplicate_values,
    generate_slug,
    is_null_or_empty,
    is_url_safe_slug,
)


def _slug_matches_name(slug: str, name: str) -> bool:
    """True if ``slug`` is the name's slug, optionally with a '-suffix' discriminator."""
    base = generate_slug(name)
    return bool(base) and (slug == base or slug.startswith(base + '-'))


class IssueType(str, Enum):
    """Kinds of structural defect reported by the audit."""

    ORPHANED = 'orphaned'
    INVALID_PARENT = 'invalid_parent'
    CIRCULAR_REFERENCE = 'circular_reference'
    MISSING_UNIT = 'missing_unit'
    DUPLICATE_CODE = 'duplicate_code'
    DUPLICATE_SLUG = 'duplicate_slug'


@dataclass
class IntegrityIssue:
    """One structural defect found by the audit."""

    type: IssueType
    message: str
    code: str

    def to_dict(self) -> Dict[str, Any]:
        return {'type': self.type.value, 'message': self.message, 'code': self.code}


@dataclass
class AuditReport:
    """Result of a whole-dataset integrity audit."""

    total_units: int
    issues: List[IntegrityIssue] = field(default_factory=list)
    counts: Dict[IssueType, int] = field(
        default_factory=lambda: {issue_type: 0 for issue_type in IssueType}
    )

    @property
    def valid(self) -> bool:
        return not self.issues

    def add_issue(self, issue: IntegrityIssue):
        """Add an issue to the report and update the per-type counts."""
        self.issues.append(issue)
        self.counts[issue.type] += 1

    def issues_of(self, issue_type: IssueType) -> List[IntegrityIssue]:
        return [issue for issue in self.issues if issue.type is IssueType(issue_type)]

    @property
    def summary(self) -> Dict[str, int]:
        summary = {'totalUnits': self.total_units}
        summary.update({issue_type.value: count for issue_type, count in self.counts.items()})
        return summary

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'issues': [issue.to_dict() for issue in self.issues],
            'summary': self.summary,
        }


class IntegrityValidator:
    """Checks codes, parent-child links and the whole hierarchy against the index."""

    def __init__(self, index: HierarchyIndex, logger: Optional[logging.Logger] = None):
        """
        Initialize the integrity validator.

        Args:
            index: Index to validate
            logger: Optional logger instance
        """
        self.index = index
        self.logger = logger or logging.getLogger(__name__)

    def validate_code_format(self, code: str) -> CodeValidation:
        """
        Classify ``code`` with the active code scheme.

        Args:
            code: Code to check; it does not need to exist in the dataset

        Returns:
            CodeValidation with the detected level and format on success
        """
        level = self.index.level_of(code)
        if level is None:
            return CodeValidation(
                valid=False,
                reason=f"Code {code!r} does not match any {self.index.scheme.name} code format"
            )
        return CodeValidation(valid=True, level=level, format=self.index.scheme.format_for(level))

    def validate_parent_child(self, parent_code: str, child_code: str) -> RelationshipValidation:
        """
        Check that ``child_code`` is a direct child of ``parent_code``.

        Invalid when either code is unknown, when the child's parent code is a
        different unit, or when the child's level is not exactly one below the
        parent's.

        Args:
            parent_code: Code of the expected parent
            child_code: Code of the child

        Returns:
            RelationshipValidation with both levels when both units exist
        """
        parent = self.index.lookup(parent_code)
        child = self.index.lookup(child_code)

        if parent is None and child is None:
            return RelationshipValidation(
                valid=False, reason=f"Unknown parent {parent_code!r} and child {child_code!r}"
            )
        if parent is None:
            return RelationshipValidation(
                valid=False, child_level=child.level, reason=f"Unknown parent {parent_code!r}"
            )
        if child is None:
            return RelationshipValidation(
                valid=False, parent_level=parent.level, reason=f"Unknown child {child_code!r}"
            )
        return self._check_relationship(parent, child)

    def _check_relationship(self, parent: AdministrativeUnit,
                            child: AdministrativeUnit) -> RelationshipValidation:
        result = RelationshipValidation(valid=False, parent_level=parent.level, child_level=child.level)

        if child.parent_code != parent.code:
            result.reason = (f"{child.code} has parent {child.parent_code!r}, "
                             f"not {parent.code!r}")
        elif not parent.level.is_parent_of(child.level):
            result.reason = (f"A {child.level.value} cannot be a direct child of a "
                             f"{parent.level.value}")
        else:
            result.valid = True
        return result

    def validate_unit_properties(self, unit: AdministrativeUnit) -> UnitValidation:
        """
        Check the fields of a single unit.

        Args:
            unit: Unit to check (it does not need to be indexed)

        Returns:
            UnitValidation listing every problem found
        """
        issues = []
        level = getattr(unit, 'level', None)
        if level is None:
            return UnitValidation(valid=False, issues=["Unknown administrative level"])

        if is_null_or_empty(unit.code):
            issues.append("Missing code")
        elif self.index.level_of(unit.code) is None:
            issues.append(f"Code {unit.code!r} does not match the {self.index.scheme.name} scheme")
        elif self.index.level_of(unit.code) is not level:
            issues.append(f"Code {unit.code!r} is not a {level.value} code")

        if is_null_or_empty(unit.name):
            issues.append("Missing name")

        if is_null_or_empty(unit.slug):
            issues.append("Missing slug")
        elif not is_url_safe_slug(unit.slug):
            issues.append(f"Slug {unit.slug!r} is not URL-safe")
        elif not is_null_or_empty(unit.name) and not _slug_matches_name(unit.slug, unit.name):
            issues.append(f"Slug {unit.slug!r} is not derived from name {unit.name!r}")

        if level.parent_level is None and unit.parent_code is not None:
            issues.append("A province must not have a parent code")
        elif level.parent_level is not None and unit.parent_code is None:
            issues.append(f"A {level.value} must have a parent code")

        return UnitValidation(valid=not issues, issues=issues)

    def audit_hierarchy(self, show_progress: bool = False) -> AuditReport:
        """
        Scan every unit once and report structural defects.

        Each unit gets at most one structural issue, the first that applies
        in the order orphaned, circular_reference, invalid_parent,
        missing_unit. Repeated codes and slugs are reported once per value.

        Args:
            show_progress: Display a tqdm progress bar over the scan

        Returns:
            AuditReport; ``valid`` is True iff no issues were found
        """
        store = self.index.store
        report = AuditReport(total_units=len(store))

        for code in detect_duplicate_values(unit.code for unit in store.iter_units()):
            report.add_issue(IntegrityIssue(
                type=IssueType.DUPLICATE_CODE,
                message=f"Code {code} is used by more than one unit",
                code=code
            ))

        for slug in detect_duplicate_values(unit.slug for unit in store.iter_units()):
            report.add_issue(IntegrityIssue(
                type=IssueType.DUPLICATE_SLUG,
                message=f"Slug {slug} is used by more than one unit",
                code=slug
            ))

        units = tqdm(store.iter_units(), total=len(store), desc="Auditing hierarchy",
                     unit="units", disable=not show_progress)
        for unit in units:
            issue = self._check_unit(unit)
            if issue is not None:
                report.add_issue(issue)

        self.logger.debug(f"Hierarchy audit finished: {report.summary}")
        return report

    def _check_unit(self, unit: AdministrativeUnit) -> Optional[IntegrityIssue]:
        if unit.parent_code is not None and self.index.lookup(unit.parent_code) is None:
            return IntegrityIssue(
                type=IssueType.ORPHANED,
                message=f"{unit.level.value.capitalize()} {unit.code} references "
                        f"missing parent {unit.parent_code}",
                code=unit.code
            )

        chain_length, has_cycle = self._walk_ancestors(unit)
        if has_cycle:
            return IntegrityIssue(
                type=IssueType.CIRCULAR_REFERENCE,
                message=f"Ancestor chain of {unit.code} revisits a code",
                code=unit.code
            )

        if unit.parent_code is not None:
            relationship = self._check_relationship(self.index.lookup(unit.parent_code), unit)
            if not relationship.valid:
                return IntegrityIssue(
                    type=IssueType.INVALID_PARENT,
                    message=f"Invalid parent for {unit.code}: {relationship.reason}",
                    code=unit.code
                )

        if chain_length != unit.depth:
            return IntegrityIssue(
                type=IssueType.MISSING_UNIT,
                message=f"Ancestor chain of {unit.code} has {chain_length} units, "
                        f"expected {unit.depth} for a {unit.level.value}",
                code=unit.code
            )
        return None

    def _walk_ancestors(self, unit: AdministrativeUnit) -> Tuple[int, bool]:
        """Return (chain length including the unit, whether the walk revisited a code)."""
        visited = {unit.code}
        current = unit
        while current.parent_code is not None:
            parent = self.index.lookup(current.parent_code)
            if parent is None:
                break
            if parent.code in visited:
                return len(visited), True
            visited.add(parent.code)
            current = parent
        return len(visited), False
