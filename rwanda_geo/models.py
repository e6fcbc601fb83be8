"""
Data models for the Rwanda administrative hierarchy.

This module defines the administrative unit variants (province, district,
sector, cell, village), the level ladder that links them, and the result
structures returned by search and validation operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from .utils.data_utils import (
    is_null_or_empty,
    safe_float_conversion,
    safe_int_conversion,
    safe_string_conversion,
)


class AdminLevel(str, Enum):
    """The five administrative levels, ordered from the top of the ladder."""

    PROVINCE = 'province'
    DISTRICT = 'district'
    SECTOR = 'sector'
    CELL = 'cell'
    VILLAGE = 'village'

    @classmethod
    def ordered(cls) -> List['AdminLevel']:
        """Return the levels in ladder order (province first)."""
        return [cls.PROVINCE, cls.DISTRICT, cls.SECTOR, cls.CELL, cls.VILLAGE]

    @property
    def depth(self) -> int:
        """Length of the ancestor chain of a unit at this level (province = 1)."""
        return AdminLevel.ordered().index(self) + 1

    @property
    def parent_level(self) -> Optional['AdminLevel']:
        index = AdminLevel.ordered().index(self)
        return AdminLevel.ordered()[index - 1] if index > 0 else None

    @property
    def child_level(self) -> Optional['AdminLevel']:
        ladder = AdminLevel.ordered()
        index = ladder.index(self)
        return ladder[index + 1] if index + 1 < len(ladder) else None

    def is_parent_of(self, other: 'AdminLevel') -> bool:
        """True if ``other`` sits exactly one level below this level."""
        return self.child_level is other


@dataclass(frozen=True)
class Coordinate:
    """Approximate center of a unit. Advisory metadata only."""

    lat: float
    lng: float

    def to_dict(self) -> Dict[str, float]:
        return {'lat': self.lat, 'lng': self.lng}


@dataclass(frozen=True)
class AdministrativeUnit:
    """
    Base record for every administrative unit.

    Concrete variants pin ``level`` as a class constant, so the level of a
    unit is always known from its type rather than guessed from its shape.
    The base class itself carries no level.

    Attributes:
        code: Globally unique code (e.g. 'RW-D-01')
        name: Official name; not unique across the dataset
        slug: URL-safe identifier derived from the name; unique
        parent_code: Code of the unit one level up (None for provinces)
        center: Optional approximate center coordinate
        id: Optional numeric identifier from the source dataset
        short_code: Optional level-local discriminator
    """

    level: ClassVar[Optional[AdminLevel]] = None

    code: str
    name: str
    slug: str
    parent_code: Optional[str] = None
    center: Optional[Coordinate] = None
    id: Optional[int] = None
    short_code: Optional[str] = None

    @property
    def depth(self) -> Optional[int]:
        return self.level.depth if self.level else None

    def has_parent(self) -> bool:
        return self.parent_code is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the unit to its wire shape (camelCase keys) plus its level."""
        data: Dict[str, Any] = {
            'code': self.code,
            'name': self.name,
            'slug': self.slug,
            'level': self.level.value if self.level else None,
        }
        if self.parent_code is not None:
            data['parentCode'] = self.parent_code
        if self.center is not None:
            data['center'] = self.center.to_dict()
        if self.id is not None:
            data['id'] = self.id
        if self.short_code is not None:
            data['shortCode'] = self.short_code
        return data


@dataclass(frozen=True)
class Province(AdministrativeUnit):
    level: ClassVar[AdminLevel] = AdminLevel.PROVINCE


@dataclass(frozen=True)
class District(AdministrativeUnit):
    level: ClassVar[AdminLevel] = AdminLevel.DISTRICT


@dataclass(frozen=True)
class Sector(AdministrativeUnit):
    level: ClassVar[AdminLevel] = AdminLevel.SECTOR


@dataclass(frozen=True)
class Cell(AdministrativeUnit):
    level: ClassVar[AdminLevel] = AdminLevel.CELL


@dataclass(frozen=True)
class Village(AdministrativeUnit):
    level: ClassVar[AdminLevel] = AdminLevel.VILLAGE


UNIT_TYPES = {
    AdminLevel.PROVINCE: Province,
    AdminLevel.DISTRICT: District,
    AdminLevel.SECTOR: Sector,
    AdminLevel.CELL: Cell,
    AdminLevel.VILLAGE: Village,
}


def unit_from_record(level: AdminLevel, record: Dict[str, Any]) -> AdministrativeUnit:
    """
    Build a typed unit from a parsed record.

    Accepts the camelCase wire keys (``parentCode``, ``shortCode``) as well as
    their snake_case forms. Null-like values (None, NaN, blank strings) in
    optional fields are treated as absent.

    Args:
        level: Level of the collection the record came from
        record: Mapping with at least ``code``, ``name`` and ``slug``

    Returns:
        Instance of the variant class for ``level``
    """
    parent_code = record.get('parentCode', record.get('parent_code'))
    short_code = record.get('shortCode', record.get('short_code'))

    center = None
    raw_center = record.get('center')
    if isinstance(raw_center, dict):
        lat = safe_float_conversion(raw_center.get('lat'))
        lng = safe_float_conversion(raw_center.get('lng'))
        if lat is not None and lng is not None:
            center = Coordinate(lat=lat, lng=lng)

    return UNIT_TYPES[level](
        code=safe_string_conversion(record.get('code')),
        name=safe_string_conversion(record.get('name')),
        slug=safe_string_conversion(record.get('slug')),
        parent_code=None if is_null_or_empty(parent_code) else safe_string_conversion(parent_code),
        center=center,
        id=safe_int_conversion(record.get('id')),
        short_code=None if is_null_or_empty(short_code) else safe_string_conversion(short_code),
    )


class MatchType(str, Enum):
    """How a suggestion matched its query, in priority order."""

    EXACT = 'exact'
    PARTIAL = 'partial'
    FUZZY = 'fuzzy'

    @property
    def priority(self) -> int:
        return [MatchType.EXACT, MatchType.PARTIAL, MatchType.FUZZY].index(self)


@dataclass(frozen=True)
class FuzzyMatch:
    """A unit accepted by fuzzy name search."""

    unit: AdministrativeUnit
    score: float
    distance: int

    def to_dict(self) -> Dict[str, Any]:
        return {'unit': self.unit.to_dict(), 'score': self.score, 'distance': self.distance}


@dataclass(frozen=True)
class Suggestion:
    """A ranked autocomplete suggestion."""

    unit: AdministrativeUnit
    match_type: MatchType
    matched_field: str
    score: float
    distance: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'unit': self.unit.to_dict(),
            'matchType': self.match_type.value,
            'matchedField': self.matched_field,
            'score': self.score,
        }
        if self.match_type is MatchType.FUZZY:
            data['distance'] = self.distance
        return data


@dataclass
class CodeValidation:
    """Result of checking a code against the active code scheme."""

    valid: bool
    level: Optional[AdminLevel] = None
    format: Optional[str] = None
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'level': self.level.value if self.level else None,
            'format': self.format,
            'reason': self.reason,
        }


@dataclass
class RelationshipValidation:
    """Result of checking one parent-child link."""

    valid: bool
    parent_level: Optional[AdminLevel] = None
    child_level: Optional[AdminLevel] = None
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.valid,
            'parentLevel': self.parent_level.value if self.parent_level else None,
            'childLevel': self.child_level.value if self.child_level else None,
            'reason': self.reason,
        }


@dataclass
class UnitValidation:
    """Result of checking the properties of a single unit."""

    valid: bool
    issues: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {'valid': self.valid, 'issues': list(self.issues)}
