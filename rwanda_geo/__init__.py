"""
rwanda_geo - Rwanda's administrative hierarchy as an in-process query library.

This package indexes the five administrative levels (province, district,
sector, cell, village) and provides lookup, navigation, exact and fuzzy
search, and integrity validation over them.
"""

__version__ = "1.0.0"
__author__ = "Data Analytics Team"

from .models import (
    AdminLevel,
    AdministrativeUnit,
    Province,
    District,
    Sector,
    Cell,
    Village,
    Coordinate,
    MatchType,
    FuzzyMatch,
    Suggestion,
    CodeValidation,
    RelationshipValidation,
    UnitValidation
)
from .config import GeoConfig
from .exceptions import RwandaGeoError, DataLoadError, FileAccessError, ConfigurationError
from .hierarchy import HierarchyIndex, HierarchyNavigator, RecordStore
from .search import SearchEngine
from .validation import AuditReport, IntegrityIssue, IntegrityValidator, IssueType
from .engine import GeoEngine, configure, get_engine, get_index, rebuild_engine, reset_engine
from .api import (
    get_all_provinces,
    get_all_districts,
    get_all_sectors,
    get_all_cells,
    get_all_villages,
    get_by_level,
    get_counts,
    get_summary,
    get_by_code,
    get_by_slug,
    is_valid_code,
    get_code_level,
    get_full_hierarchy,
    get_hierarchy,
    get_children,
    get_direct_children,
    get_siblings,
    get_all_descendants,
    get_districts_by_province,
    get_sectors_by_district,
    get_cells_by_sector,
    get_villages_by_cell,
    search_by_name,
    search_by_slug,
    search_by_partial_code,
    fuzzy_search_by_name,
    get_suggestions,
    validate_code_format,
    validate_parent_child_relationship,
    validate_hierarchy_integrity,
    validate_unit_properties
)
