"""
Utility functions and helpers.
"""

from .data_utils import (
    is_null_or_empty,
    safe_int_conversion,
    safe_float_conversion,
    safe_string_conversion,
    normalize_query,
    generate_slug,
    is_url_safe_slug,
    detect_duplicate_values
)

__all__ = [
    'is_null_or_empty',
    'safe_int_conversion',
    'safe_float_conversion',
    'safe_string_conversion',
    'normalize_query',
    'generate_slug',
    'is_url_safe_slug',
    'detect_duplicate_values'
]
