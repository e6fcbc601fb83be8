"""
Fuzzy search strategy for administrative units.

This module provides the FuzzyMatcher class that ranks units by Levenshtein
edit distance between the query and the unit name.
"""

import logging
from typing import List, Optional

from rapidfuzz.distance import Levenshtein

from ..hierarchy.hierarchy_index import HierarchyIndex
from ..models import FuzzyMatch
from ..utils.data_utils import normalize_query


def edit_distance(left: str, right: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    return Levenshtein.distance(left, right)


def similarity_score(query: str, candidate: str, distance: int) -> float:
    """
    Normalize an edit distance into a 0..1 similarity.

    ``1 - distance / max(len(query), len(candidate))``; identical strings
    score 1.0.
    """
    longest = max(len(query), len(candidate))
    if longest == 0:
        return 1.0
    return 1.0 - distance / longest


class FuzzyMatcher:
    """
    Performs fuzzy name matching within a maximum edit distance.

    Names and queries are compared lower-cased.
    """

    def __init__(self, index: HierarchyIndex, max_distance: int = 3, limit: int = 10,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the FuzzyMatcher.

        Args:
            index: Index whose units are searched
            max_distance: Default maximum accepted edit distance
            limit: Default maximum number of results
            logger: Optional logger instance
        """
        self.index = index
        self.max_distance = max_distance
        self.limit = limit
        self.logger = logger or logging.getLogger(__name__)

    def search(self, query: str, max_distance: Optional[int] = None,
               limit: Optional[int] = None) -> List[FuzzyMatch]:
        """
        Find units whose name lies within ``max_distance`` edits of ``query``.

        Args:
            query: Free-text name query
            max_distance: Maximum accepted edit distance (default from init)
            limit: Maximum number of results (default from init)

        Returns:
            Matches sorted by descending score, then ascending distance,
            name and code
        """
        max_distance = self.max_distance if max_distance is None else max_distance
        limit = self.limit if limit is None else limit

        term = normalize_query(query)
        if not term or limit <= 0 or max_distance < 0:
            return []

        matches = []
        for unit in self.index:
            name = unit.name.lower()
            distance = edit_distance(term, name)
            if distance <= max_distance:
                matches.append(FuzzyMatch(
                    unit=unit,
                    score=similarity_score(term, name, distance),
                    distance=distance
                ))

        matches.sort(key=lambda m: (-m.score, m.distance, m.unit.name.casefold(), m.unit.code))

        self.logger.debug(
            f"Fuzzy search '{term}' (max distance {max_distance}): {len(matches)} candidates"
        )
        return matches[:limit]
