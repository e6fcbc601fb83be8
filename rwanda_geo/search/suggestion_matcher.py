"""
Ranked autocomplete suggestions blending exact, partial and fuzzy matching.

For each unit the best match is classified once:

    exact    name, code or slug equals the query (case-insensitive)
    partial  name, code or slug contains the query
    fuzzy    name within ``max_distance`` edits of the query

Results are ordered by match type (exact, partial, fuzzy), then by edit
distance, then alphabetically by name and finally by code, so the order never
depends on iteration order.
"""

import functools
import logging
from typing import List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

from ..hierarchy.hierarchy_index import HierarchyIndex
from ..models import AdministrativeUnit, MatchType, Suggestion
from ..utils.data_utils import normalize_query
from .fuzzy_matcher import similarity_score


MATCH_FIELDS = ('name', 'code', 'slug')


class SuggestionMatcher:
    """
    Produces typed, ranked suggestions for a free-text query.

    Results are memoized per matcher. A matcher belongs to exactly one index,
    so rebuilding the index discards the cache along with the old matcher.
    """

    def __init__(self, index: HierarchyIndex, max_distance: int = 3, limit: int = 10,
                 cache_size: int = 256, logger: Optional[logging.Logger] = None):
        """
        Initialize the SuggestionMatcher.

        Args:
            index: Index whose units are searched
            max_distance: Maximum name edit distance for fuzzy suggestions
            limit: Default maximum number of suggestions
            cache_size: Number of (query, limit) results to memoize; 0 disables
            logger: Optional logger instance
        """
        self.index = index
        self.max_distance = max_distance
        self.limit = limit
        self.logger = logger or logging.getLogger(__name__)
        self._cached_suggest = functools.lru_cache(maxsize=cache_size)(self._compute)

    def suggest(self, query: str, limit: Optional[int] = None) -> List[Suggestion]:
        """
        Get ranked suggestions for ``query``.

        Args:
            query: Free-text query matched against name, code and slug
            limit: Maximum number of suggestions (default from init)

        Returns:
            Up to ``limit`` suggestions; empty for blank queries or limit <= 0
        """
        limit = self.limit if limit is None else limit
        term = normalize_query(query)
        if not term or limit <= 0:
            return []
        return list(self._cached_suggest(term, limit))

    def cache_info(self):
        return self._cached_suggest.cache_info()

    def clear_cache(self):
        self._cached_suggest.cache_clear()

    def _compute(self, term: str, limit: int) -> Tuple[Suggestion, ...]:
        suggestions = []
        for unit in self.index:
            suggestion = self._classify(unit, term)
            if suggestion is not None:
                suggestions.append(suggestion)

        suggestions.sort(key=self._rank_key)
        self.logger.debug(f"Suggestions for '{term}': {len(suggestions)} candidates")
        return tuple(suggestions[:limit])

    def _classify(self, unit: AdministrativeUnit, term: str) -> Optional[Suggestion]:
        """Classify the best match of ``term`` against one unit."""
        values = {field: getattr(unit, field).lower() for field in MATCH_FIELDS}

        for field in MATCH_FIELDS:
            if values[field] == term:
                return Suggestion(unit=unit, match_type=MatchType.EXACT,
                                  matched_field=field, score=1.0)

        for field in MATCH_FIELDS:
            if term in values[field]:
                return Suggestion(unit=unit, match_type=MatchType.PARTIAL,
                                  matched_field=field, score=len(term) / len(values[field]))

        name = values['name']
        distance = Levenshtein.distance(term, name, score_cutoff=self.max_distance)
        if distance <= self.max_distance:
            return Suggestion(unit=unit, match_type=MatchType.FUZZY, matched_field='name',
                              score=similarity_score(term, name, distance), distance=distance)
        return None

    @staticmethod
    def _rank_key(suggestion: Suggestion):
        return (
            suggestion.match_type.priority,
            suggestion.distance,
            suggestion.unit.name.casefold(),
            suggestion.unit.code,
        )
