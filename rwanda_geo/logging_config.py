"""
Logging configuration for the rwanda_geo command-line tool.

Library modules log through ``logging.getLogger(__name__)`` and only emit
DEBUG records; this module wires handlers for interactive use.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


class GeoLogger:
    """Custom logger for rwanda_geo operations."""

    def __init__(self, name: str = "rwanda_geo", level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional file path for log output
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))

        # Clear any existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Console output goes to stderr so JSON results on stdout stay clean
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        if log_file:
            self._setup_file_handler(log_file, formatter)

    def _setup_file_handler(self, log_file: str, formatter: logging.Formatter):
        """Set up file logging handler."""
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def log_audit_summary(self, report):
        """Log the outcome of a hierarchy audit."""
        self.info("=" * 60)
        self.info("HIERARCHY AUDIT COMPLETED")
        self.info("=" * 60)
        self.info(f"Total units: {report.total_units:,}")
        for issue_type, count in report.counts.items():
            self.info(f"{issue_type.value}: {count:,}")
        if report.valid:
            self.info("Hierarchy is valid")
        else:
            self.warning(f"DATA QUALITY: {len(report.issues):,} integrity issues found")


def setup_logging(config) -> GeoLogger:
    """
    Set up logging based on configuration.

    Args:
        config: GeoConfig instance

    Returns:
        Configured GeoLogger instance
    """
    return GeoLogger(
        name="rwanda_geo",
        level=config.log_level,
        log_file=config.log_file
    )
