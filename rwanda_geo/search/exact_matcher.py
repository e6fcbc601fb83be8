"""
Exact search strategy for administrative units.

This module provides the ExactMatcher class: case-insensitive substring
search over names and slugs, and partial-code search. Each call is a linear
scan of the index; the dataset is small enough that no secondary text index
is kept.
"""

import logging
from typing import List, Optional

from ..hierarchy.hierarchy_index import HierarchyIndex
from ..models import AdministrativeUnit
from ..utils.data_utils import normalize_query


class ExactMatcher:
    """Substring matching over names, slugs and codes."""

    def __init__(self, index: HierarchyIndex, logger: Optional[logging.Logger] = None):
        """
        Initialize the ExactMatcher.

        Args:
            index: Index whose units are searched
            logger: Optional logger instance
        """
        self.index = index
        self.logger = logger or logging.getLogger(__name__)

    def search_by_name(self, text: str) -> List[AdministrativeUnit]:
        """
        Find units whose name contains ``text`` (case-insensitive).

        Args:
            text: Fragment to look for

        Returns:
            Matching units in store order; empty for blank input
        """
        term = normalize_query(text)
        if not term:
            return []
        return [unit for unit in self.index if term in unit.name.lower()]

    def search_by_slug(self, text: str) -> List[AdministrativeUnit]:
        """Find units whose slug contains ``text`` (case-insensitive)."""
        term = normalize_query(text)
        if not term:
            return []
        return [unit for unit in self.index if term in unit.slug.lower()]

    def search_by_partial_code(self, fragment: str, limit: int = 10) -> List[AdministrativeUnit]:
        """
        Find units whose code contains ``fragment``.

        Codes are compared upper-cased. An empty fragment matches nothing.

        Args:
            fragment: Code fragment (e.g. 'RW-D-0')
            limit: Maximum number of results

        Returns:
            Up to ``limit`` units in store order
        """
        if limit <= 0 or not isinstance(fragment, str):
            return []

        term = fragment.strip().upper()
        if not term:
            return []

        results = []
        for unit in self.index:
            if term in unit.code.upper():
                results.append(unit)
                if len(results) >= limit:
                    break
        return results
