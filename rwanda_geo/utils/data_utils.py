"""
Data utility functions for type conversions and null handling.

This module provides helpers for cleaning values read from the record files,
normalizing query strings, and detecting duplicated keys.
"""

import re
from typing import Any, Iterable, List, Optional

import pandas as pd


_SLUG_STRIP = re.compile(r'[^a-z0-9\s-]')
_SLUG_SPACES = re.compile(r'\s+')
_SLUG_DASHES = re.compile(r'-+')
SLUG_PATTERN = re.compile(r'^[a-z0-9]+(?:-[a-z0-9]+)*$')


def is_null_or_empty(value: Any) -> bool:
    """
    Check if a value is null, empty, or contains only whitespace.

    Args:
        value: Value to check

    Returns:
        True if value is null/empty, False otherwise
    """
    if value is None:
        return True

    if isinstance(value, str):
        return not value.strip()

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return True

    return False


def safe_int_conversion(value: Any) -> Optional[int]:
    """
    Safely convert a value to integer, handling nulls and invalid values.

    Args:
        value: Value to convert to integer

    Returns:
        Integer value or None if conversion fails
    """
    if is_null_or_empty(value):
        return None

    try:
        # Handle string representations of floats (e.g., "123.0")
        if isinstance(value, str):
            value = value.strip()
        return int(float(value))
    except (ValueError, TypeError):
        return None


def safe_float_conversion(value: Any) -> Optional[float]:
    """Safely convert a value to float, returning None for nulls and junk."""
    if is_null_or_empty(value):
        return None

    try:
        return float(value)
    except (ValueError, TypeError):
        return None


def safe_string_conversion(value: Any) -> str:
    """
    Safely convert a value to string, handling nulls and cleaning whitespace.

    Args:
        value: Value to convert to string

    Returns:
        Cleaned string value or empty string if null
    """
    if is_null_or_empty(value):
        return ""

    return str(value).strip()


def normalize_query(value: Any) -> str:
    """Lower-case and strip a free-text query; non-strings normalize to ''."""
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def generate_slug(name: str) -> str:
    """
    Derive a URL-safe slug from a display name.

    Lower-cases, drops anything outside ``[a-z0-9 -]``, turns whitespace runs
    into single hyphens and trims hyphens from both ends.
    """
    slug = _SLUG_STRIP.sub('', safe_string_conversion(name).lower())
    slug = _SLUG_SPACES.sub('-', slug)
    slug = _SLUG_DASHES.sub('-', slug)
    return slug.strip('-')


def is_url_safe_slug(slug: str) -> bool:
    return bool(slug) and SLUG_PATTERN.match(slug) is not None


def detect_duplicate_values(values: Iterable[str]) -> List[str]:
    """
    Return every value that occurs more than once, in first-seen order.

    Args:
        values: Keys to check (codes, slugs)

    Returns:
        List of distinct duplicated values
    """
    series = pd.Series(list(values), dtype=object)
    if series.empty:
        return []

    duplicated_mask = series.duplicated(keep='first')
    return list(dict.fromkeys(series[duplicated_mask].tolist()))
