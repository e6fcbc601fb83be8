"""
Geo engine: one hierarchy index with its navigator, search engine and
validator, plus the process-wide memoized default engine.

The default engine is built lazily on first use behind a single lock and
read without locking afterwards. ``rebuild_engine`` builds a complete new
engine before swapping the module reference, so readers never observe a
half-built index and per-index caches are dropped with the old engine.
"""

import logging
import threading
from typing import Optional

from .config import GeoConfig
from .data_loader import DataLoader
from .hierarchy.hierarchy_index import HierarchyIndex
from .hierarchy.navigator import HierarchyNavigator
from .hierarchy.record_store import RecordStore
from .search.search_engine import SearchEngine
from .validation.integrity_validator import IntegrityValidator


class GeoEngine:
    """Bundles every query component built over one index."""

    def __init__(self, store: RecordStore, config: Optional[GeoConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Build the index and the components layered on it.

        Args:
            store: Record store to index
            config: Optional configuration (defaults to GeoConfig())
            logger: Optional logger instance
        """
        self.config = config or GeoConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.index = HierarchyIndex(store, code_scheme=self.config.code_scheme, logger=self.logger)
        self.navigator = HierarchyNavigator(self.index, logger=self.logger)
        self.search = SearchEngine(
            self.index,
            fuzzy_max_distance=self.config.fuzzy_max_distance,
            fuzzy_limit=self.config.fuzzy_limit,
            suggestion_max_distance=self.config.suggestion_max_distance,
            suggestion_limit=self.config.suggestion_limit,
            suggestion_cache_size=self.config.suggestion_cache_size,
            logger=self.logger
        )
        self.validator = IntegrityValidator(self.index, logger=self.logger)

    @classmethod
    def from_config(cls, config: Optional[GeoConfig] = None,
                    logger: Optional[logging.Logger] = None) -> 'GeoEngine':
        """Load the record store from ``config.data_directory`` and build an engine."""
        config = config or GeoConfig()
        store = DataLoader(logger=logger).load_store(config.data_directory)
        return cls(store, config=config, logger=logger)

    @property
    def store(self) -> RecordStore:
        return self.index.store


_engine: Optional[GeoEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> GeoEngine:
    """
    Return the memoized default engine, building it on first use.

    The first call loads the shipped dataset with the default configuration
    unless ``configure`` or ``rebuild_engine`` installed another engine.
    """
    global _engine
    engine = _engine
    if engine is not None:
        return engine

    with _engine_lock:
        if _engine is None:
            _engine = GeoEngine.from_config()
        return _engine


def get_index() -> HierarchyIndex:
    return get_engine().index


def rebuild_engine(store: Optional[RecordStore] = None,
                   config: Optional[GeoConfig] = None) -> GeoEngine:
    """
    Build a fresh engine and swap it in as the default.

    Args:
        store: Record store to index; loaded from ``config`` when omitted
        config: Configuration for the new engine

    Returns:
        The newly installed engine
    """
    global _engine
    with _engine_lock:
        if store is None:
            engine = GeoEngine.from_config(config)
        else:
            engine = GeoEngine(store, config=config)
        _engine = engine
    return engine


def configure(config: GeoConfig) -> GeoEngine:
    """Install a default engine built from ``config``."""
    return rebuild_engine(config=config)


def reset_engine():
    """Drop the memoized engine; the next query rebuilds it lazily."""
    global _engine
    with _engine_lock:
        _engine = None
