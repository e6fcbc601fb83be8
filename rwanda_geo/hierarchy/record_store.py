"""
Record store holding the five administrative collections.

The store is the read-only input of the index: five ordered, immutable
sequences of typed units, already materialized in memory.
"""

from typing import Any, Dict, Iterable, Iterator, Mapping, Sequence, Tuple

from ..models import AdminLevel, AdministrativeUnit, unit_from_record


class RecordStore:
    """
    Five immutable, ordered collections of administrative units.

    Iteration order is always province, district, sector, cell, village, and
    within a collection the order the records were supplied in.
    """

    def __init__(self,
                 provinces: Iterable[AdministrativeUnit] = (),
                 districts: Iterable[AdministrativeUnit] = (),
                 sectors: Iterable[AdministrativeUnit] = (),
                 cells: Iterable[AdministrativeUnit] = (),
                 villages: Iterable[AdministrativeUnit] = ()):
        self._collections: Dict[AdminLevel, Tuple[AdministrativeUnit, ...]] = {
            AdminLevel.PROVINCE: tuple(provinces),
            AdminLevel.DISTRICT: tuple(districts),
            AdminLevel.SECTOR: tuple(sectors),
            AdminLevel.CELL: tuple(cells),
            AdminLevel.VILLAGE: tuple(villages),
        }

    @classmethod
    def from_records(cls, records: Mapping[AdminLevel, Sequence[Mapping[str, Any]]]) -> 'RecordStore':
        """
        Build a store from parsed records grouped by level.

        Args:
            records: Mapping of level to a sequence of record dicts in the
                wire shape (``code``, ``name``, ``slug``, ``parentCode``, ...)

        Returns:
            RecordStore with typed units
        """
        units = {
            level: [unit_from_record(level, dict(record)) for record in records.get(level, ())]
            for level in AdminLevel.ordered()
        }
        return cls(
            provinces=units[AdminLevel.PROVINCE],
            districts=units[AdminLevel.DISTRICT],
            sectors=units[AdminLevel.SECTOR],
            cells=units[AdminLevel.CELL],
            villages=units[AdminLevel.VILLAGE],
        )

    @property
    def provinces(self) -> Tuple[AdministrativeUnit, ...]:
        return self._collections[AdminLevel.PROVINCE]

    @property
    def districts(self) -> Tuple[AdministrativeUnit, ...]:
        return self._collections[AdminLevel.DISTRICT]

    @property
    def sectors(self) -> Tuple[AdministrativeUnit, ...]:
        return self._collections[AdminLevel.SECTOR]

    @property
    def cells(self) -> Tuple[AdministrativeUnit, ...]:
        return self._collections[AdminLevel.CELL]

    @property
    def villages(self) -> Tuple[AdministrativeUnit, ...]:
        return self._collections[AdminLevel.VILLAGE]

    def collection(self, level: AdminLevel) -> Tuple[AdministrativeUnit, ...]:
        """Return the collection for one level."""
        return self._collections[AdminLevel(level)]

    def iter_units(self) -> Iterator[AdministrativeUnit]:
        """Iterate every unit in store order."""
        for level in AdminLevel.ordered():
            yield from self._collections[level]

    def replace_collection(self, level: AdminLevel,
                           units: Iterable[AdministrativeUnit]) -> 'RecordStore':
        """Return a new store with one collection swapped out."""
        collections = dict(self._collections)
        collections[AdminLevel(level)] = tuple(units)
        return RecordStore(
            provinces=collections[AdminLevel.PROVINCE],
            districts=collections[AdminLevel.DISTRICT],
            sectors=collections[AdminLevel.SECTOR],
            cells=collections[AdminLevel.CELL],
            villages=collections[AdminLevel.VILLAGE],
        )

    def counts(self) -> Dict[str, int]:
        """Count units per level, plus the total."""
        counts = {
            'provinces': len(self.provinces),
            'districts': len(self.districts),
            'sectors': len(self.sectors),
            'cells': len(self.cells),
            'villages': len(self.villages),
        }
        counts['total'] = sum(counts.values())
        return counts

    def __len__(self) -> int:
        return sum(len(units) for units in self._collections.values())

    def __repr__(self) -> str:
        counts = self.counts()
        return (f"RecordStore(provinces={counts['provinces']}, districts={counts['districts']}, "
                f"sectors={counts['sectors']}, cells={counts['cells']}, villages={counts['villages']})")
