"""
Shared helpers for loading and altering record stores in tests.
"""

import dataclasses
from typing import List

from rwanda_geo.config import DEFAULT_DATA_DIRECTORY
from rwanda_geo.data_loader import DataLoader
from rwanda_geo.hierarchy.record_store import RecordStore


SAMPLE_COUNTS = {
    'provinces': 5,
    'districts': 7,
    'sectors': 9,
    'cells': 10,
    'villages': 20,
    'total': 51,
}


def load_sample_store() -> RecordStore:
    """Load the dataset shipped in rwanda_geo/data."""
    return DataLoader().load_store(DEFAULT_DATA_DIRECTORY)


def replace_unit(store: RecordStore, code: str, **changes) -> RecordStore:
    """Return a copy of ``store`` with the unit ``code`` modified."""
    for unit in store.iter_units():
        if unit.code == code:
            collection = [dataclasses.replace(u, **changes) if u.code == code else u
                          for u in store.collection(unit.level)]
            return store.replace_collection(unit.level, collection)
    raise KeyError(code)


def append_unit(store: RecordStore, unit) -> RecordStore:
    collection: List = list(store.collection(unit.level)) + [unit]
    return store.replace_collection(unit.level, collection)
