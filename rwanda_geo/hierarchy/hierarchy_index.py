"""
Hierarchy index: code -> unit lookup across all five levels.

The index is derived state. It is built once from a RecordStore in a single
pass and never mutated afterwards, so concurrent readers need no locking.
"""

import logging
from typing import Dict, Iterator, List, Optional, Union

from ..models import AdminLevel, AdministrativeUnit
from .code_scheme import CodeScheme, DEFAULT_CODE_SCHEME, get_code_scheme
from .record_store import RecordStore


class HierarchyIndex:
    """
    O(1) lookup from code to administrative unit.

    Lookups never raise: an unknown code yields None. When the store holds
    duplicate codes the last unit inserted wins; duplicates are reported by
    the integrity validator, not here.
    """

    def __init__(self, store: RecordStore,
                 code_scheme: Union[str, CodeScheme] = DEFAULT_CODE_SCHEME,
                 logger: Optional[logging.Logger] = None):
        """
        Build the index.

        Args:
            store: Record store to index
            code_scheme: Scheme name or CodeScheme used by ``level_of``
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.store = store
        self.scheme = code_scheme if isinstance(code_scheme, CodeScheme) else get_code_scheme(code_scheme)
        self._units: Dict[str, AdministrativeUnit] = {}
        self._slugs: Dict[str, AdministrativeUnit] = {}
        self._build()

    def _build(self):
        for unit in self.store.iter_units():
            self._units[unit.code] = unit
            self._slugs.setdefault(unit.slug.lower(), unit)

        self.logger.debug(
            f"Built hierarchy index with {len(self._units):,} codes "
            f"from {len(self.store):,} records (scheme: {self.scheme.name})"
        )

    def lookup(self, code: str) -> Optional[AdministrativeUnit]:
        """Return the unit registered under ``code``, or None. Surrounding whitespace is ignored."""
        if not isinstance(code, str):
            return None
        return self._units.get(code.strip())

    def is_valid_code(self, code: str) -> bool:
        """True iff ``code`` resolves to a unit in the index."""
        return self.lookup(code) is not None

    def level_of(self, code: str) -> Optional[AdminLevel]:
        """Classify a code with the active code scheme; None if unclassifiable."""
        return self.scheme.classify(code)

    def by_slug(self, slug: str) -> Optional[AdministrativeUnit]:
        """Exact, case-insensitive slug lookup."""
        if not isinstance(slug, str):
            return None
        return self._slugs.get(slug.strip().lower())

    def units(self) -> List[AdministrativeUnit]:
        """All units in store order."""
        return list(self.store.iter_units())

    def units_at(self, level: AdminLevel) -> List[AdministrativeUnit]:
        return list(self.store.collection(level))

    def __iter__(self) -> Iterator[AdministrativeUnit]:
        return self.store.iter_units()

    def __contains__(self, code) -> bool:
        return self.is_valid_code(code)

    def __len__(self) -> int:
        return len(self._units)
