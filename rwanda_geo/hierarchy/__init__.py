"""
Hierarchy module for the rwanda_geo package.

This module provides the record store, the code -> unit index, code scheme
classification and navigation across the five administrative levels
(province, district, sector, cell, village).
"""

from rwanda_geo.hierarchy.code_scheme import (
    CodeScheme,
    CODE_SCHEMES,
    DEFAULT_CODE_SCHEME,
    PREFIXED_SCHEME,
    SEGMENTED_SCHEME,
    get_code_scheme
)
from rwanda_geo.hierarchy.record_store import RecordStore
from rwanda_geo.hierarchy.hierarchy_index import HierarchyIndex
from rwanda_geo.hierarchy.navigator import HierarchyNavigator

__all__ = [
    'CodeScheme',
    'CODE_SCHEMES',
    'DEFAULT_CODE_SCHEME',
    'PREFIXED_SCHEME',
    'SEGMENTED_SCHEME',
    'get_code_scheme',
    'RecordStore',
    'HierarchyIndex',
    'HierarchyNavigator'
]
