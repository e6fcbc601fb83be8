"""
Search engine combining the exact, fuzzy and suggestion strategies.
"""

import logging
from typing import List, Optional

from ..hierarchy.hierarchy_index import HierarchyIndex
from ..models import AdministrativeUnit, FuzzyMatch, Suggestion
from .exact_matcher import ExactMatcher
from .fuzzy_matcher import FuzzyMatcher
from .suggestion_matcher import SuggestionMatcher


class SearchEngine:
    """
    Locates units by name, slug or code.

    All methods are total: blank queries, unknown text and non-positive
    limits give empty lists.
    """

    def __init__(self, index: HierarchyIndex, fuzzy_max_distance: int = 3, fuzzy_limit: int = 10,
                 suggestion_max_distance: int = 3, suggestion_limit: int = 10,
                 suggestion_cache_size: int = 256, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.index = index
        self.exact_matcher = ExactMatcher(index, logger=self.logger)
        self.fuzzy_matcher = FuzzyMatcher(
            index, max_distance=fuzzy_max_distance, limit=fuzzy_limit, logger=self.logger
        )
        self.suggestion_matcher = SuggestionMatcher(
            index,
            max_distance=suggestion_max_distance,
            limit=suggestion_limit,
            cache_size=suggestion_cache_size,
            logger=self.logger
        )

    def search_by_name(self, text: str) -> List[AdministrativeUnit]:
        return self.exact_matcher.search_by_name(text)

    def search_by_slug(self, text: str) -> List[AdministrativeUnit]:
        return self.exact_matcher.search_by_slug(text)

    def search_by_partial_code(self, fragment: str, limit: int = 10) -> List[AdministrativeUnit]:
        return self.exact_matcher.search_by_partial_code(fragment, limit)

    def fuzzy_search_by_name(self, query: str, max_distance: Optional[int] = None,
                             limit: Optional[int] = None) -> List[FuzzyMatch]:
        return self.fuzzy_matcher.search(query, max_distance=max_distance, limit=limit)

    def get_suggestions(self, query: str, limit: Optional[int] = None) -> List[Suggestion]:
        return self.suggestion_matcher.suggest(query, limit)
