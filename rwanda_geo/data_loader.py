"""
Data loading module.

This module provides the DataLoader class that reads the five record
collections (provinces, districts, sectors, cells, villages) from JSON or
gzipped JSON files into a RecordStore.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from .exceptions import DataLoadError, FileAccessError
from .hierarchy.record_store import RecordStore
from .models import AdminLevel


COLLECTION_FILES = {
    AdminLevel.PROVINCE: 'provinces',
    AdminLevel.DISTRICT: 'districts',
    AdminLevel.SECTOR: 'sectors',
    AdminLevel.CELL: 'cells',
    AdminLevel.VILLAGE: 'villages',
}
REQUIRED_COLUMNS = ['code', 'name', 'slug']


class DataLoader:
    """
    Handles loading of the record collections for the hierarchy index.

    For each collection ``<name>.json.gz`` is preferred over ``<name>.json``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the DataLoader.

        Args:
            logger: Optional logger instance for logging operations
        """
        self.logger = logger or logging.getLogger(__name__)

    def load_store(self, data_directory: str) -> RecordStore:
        """
        Load all five collections from a directory.

        Args:
            data_directory: Directory holding the collection files

        Returns:
            RecordStore with typed units

        Raises:
            FileAccessError: If the directory does not exist
            DataLoadError: If a collection file is missing or malformed
        """
        directory = Path(data_directory)
        if not directory.is_dir():
            raise FileAccessError(
                f"Data directory not found: {data_directory}",
                file_path=str(data_directory),
                operation="list"
            )

        self.logger.info(f"Loading administrative records from: {directory}")
        records = {
            level: self.load_collection(directory, collection)
            for level, collection in COLLECTION_FILES.items()
        }

        store = RecordStore.from_records(records)
        self.logger.info(f"Loaded record store: {store.counts()}")
        return store

    def resolve_collection_path(self, directory: Path, collection: str) -> Path:
        """Return the file to read for ``collection``, preferring the gzipped form."""
        for candidate in (directory / f"{collection}.json.gz", directory / f"{collection}.json"):
            if candidate.is_file():
                return candidate

        raise DataLoadError(
            f"No {collection}.json.gz or {collection}.json in {directory}",
            file_path=str(directory),
            collection=collection
        )

    def load_collection(self, directory: Path, collection: str) -> List[Dict[str, Any]]:
        """
        Read one collection file into a list of record dicts.

        Args:
            directory: Directory holding the file
            collection: Collection name (e.g. 'districts')

        Returns:
            List of records in file order

        Raises:
            DataLoadError: If the file is missing, malformed or lacks columns
        """
        file_path = self.resolve_collection_path(Path(directory), collection)

        try:
            df = pd.read_json(file_path, orient='records', dtype=False,
                              convert_dates=False, compression='infer')
        except ValueError as e:
            raise DataLoadError(
                f"Error parsing {collection} file: {str(e)}",
                file_path=str(file_path),
                collection=collection,
                original_error=e
            )
        except OSError as e:
            raise DataLoadError(
                f"Could not read {collection} file: {str(e)}",
                file_path=str(file_path),
                collection=collection,
                original_error=e
            )

        if df.empty:
            self.logger.debug(f"{collection}: file contains no records")
            return []

        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise DataLoadError(
                f"{collection} file is missing required fields: {missing_columns}",
                file_path=str(file_path),
                collection=collection
            )

        self.logger.debug(f"{collection}: loaded {len(df):,} records from {file_path.name}")
        return df.to_dict(orient='records')
