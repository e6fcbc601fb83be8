"""
Search strategy components.
"""

from .exact_matcher import ExactMatcher
from .fuzzy_matcher import FuzzyMatcher, edit_distance, similarity_score
from .suggestion_matcher import SuggestionMatcher
from .search_engine import SearchEngine

__all__ = [
    'ExactMatcher',
    'FuzzyMatcher',
    'SuggestionMatcher',
    'SearchEngine',
    'edit_distance',
    'similarity_score'
]
