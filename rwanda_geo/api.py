"""
Query API over the default engine.

Every function here is a total function over its inputs: unknown codes and
empty queries give None or empty lists, never exceptions. The default engine
is built on first use (see ``rwanda_geo.engine``).
"""

from typing import Dict, List, Optional, Union

from .engine import get_engine
from .models import (
    AdminLevel,
    AdministrativeUnit,
    CodeValidation,
    FuzzyMatch,
    RelationshipValidation,
    Suggestion,
    UnitValidation,
)
from .validation.integrity_validator import AuditReport


# Collections

def get_all_provinces() -> List[AdministrativeUnit]:
    return list(get_engine().store.provinces)


def get_all_districts() -> List[AdministrativeUnit]:
    return list(get_engine().store.districts)


def get_all_sectors() -> List[AdministrativeUnit]:
    return list(get_engine().store.sectors)


def get_all_cells() -> List[AdministrativeUnit]:
    return list(get_engine().store.cells)


def get_all_villages() -> List[AdministrativeUnit]:
    return list(get_engine().store.villages)


def get_by_level(level: Union[AdminLevel, str]) -> List[AdministrativeUnit]:
    """All units at ``level``; an unknown level name gives an empty list."""
    try:
        level = AdminLevel(level)
    except ValueError:
        return []
    return get_engine().index.units_at(level)


def get_counts() -> Dict[str, int]:
    """Unit counts per level plus the total."""
    return get_engine().store.counts()


def get_summary() -> Dict[str, int]:
    """Unit counts per level."""
    counts = get_counts()
    counts.pop('total')
    return counts


# Lookup

def get_by_code(code: str) -> Optional[AdministrativeUnit]:
    return get_engine().index.lookup(code)


def get_by_slug(slug: str) -> Optional[AdministrativeUnit]:
    return get_engine().index.by_slug(slug)


def is_valid_code(code: str) -> bool:
    """True iff ``code`` belongs to a unit in the dataset."""
    return get_engine().index.is_valid_code(code)


def get_code_level(code: str) -> Optional[AdminLevel]:
    """Level of ``code`` according to the active code scheme."""
    return get_engine().index.level_of(code)


# Navigation

def get_full_hierarchy(code: str) -> List[AdministrativeUnit]:
    """Ancestor chain from the province down to the unit itself."""
    return get_engine().navigator.ancestor_chain(code)


get_hierarchy = get_full_hierarchy


def get_children(parent_code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.children(parent_code)


def get_direct_children(code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.direct_children(code)


def get_siblings(code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.siblings(code)


def get_all_descendants(code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.descendants(code)


def get_districts_by_province(province_code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.units_under(province_code, AdminLevel.PROVINCE)


def get_sectors_by_district(district_code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.units_under(district_code, AdminLevel.DISTRICT)


def get_cells_by_sector(sector_code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.units_under(sector_code, AdminLevel.SECTOR)


def get_villages_by_cell(cell_code: str) -> List[AdministrativeUnit]:
    return get_engine().navigator.units_under(cell_code, AdminLevel.CELL)


# Search

def search_by_name(name: str) -> List[AdministrativeUnit]:
    return get_engine().search.search_by_name(name)


def search_by_slug(slug: str) -> List[AdministrativeUnit]:
    return get_engine().search.search_by_slug(slug)


def search_by_partial_code(fragment: str, limit: int = 10) -> List[AdministrativeUnit]:
    return get_engine().search.search_by_partial_code(fragment, limit)


def fuzzy_search_by_name(query: str, max_distance: Optional[int] = None,
                         limit: Optional[int] = None) -> List[FuzzyMatch]:
    return get_engine().search.fuzzy_search_by_name(query, max_distance, limit)


def get_suggestions(query: str, limit: Optional[int] = None) -> List[Suggestion]:
    return get_engine().search.get_suggestions(query, limit)


# Validation

def validate_code_format(code: str) -> CodeValidation:
    return get_engine().validator.validate_code_format(code)


def validate_parent_child_relationship(parent_code: str, child_code: str) -> RelationshipValidation:
    return get_engine().validator.validate_parent_child(parent_code, child_code)


def validate_hierarchy_integrity(show_progress: bool = False) -> AuditReport:
    return get_engine().validator.audit_hierarchy(show_progress=show_progress)


def validate_unit_properties(unit: AdministrativeUnit) -> UnitValidation:
    return get_engine().validator.validate_unit_properties(unit)
