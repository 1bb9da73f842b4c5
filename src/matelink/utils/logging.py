"""Centralized logging utilities for matelink.

Provides a single place to configure logging and fetch namespaced loggers.
"""

from __future__ import annotations

import logging
import warnings
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
CONSOLE_FORMAT = "%(levelname)s: %(message)s"

# Log rotation settings
DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def level_from_name(name: Optional[str], default: int = logging.WARNING) -> int:
    """Translate a config-file level name such as ``"info"`` to a logging level."""
    if not name:
        return default
    return LEVELS.get(str(name).upper(), default)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """Configure logging for the 'matelink' namespace.

    Args:
        level: Logging level for the application logger
        log_file: Optional path for log file output
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)

    Notes:
        - Root logger kept at WARNING to suppress third-party noise
        - Console handler writes to stderr so stdout stays reserved for edges
        - File handler (if any) is detailed at DEBUG and rotates
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    app_logger = logging.getLogger("matelink")
    app_logger.setLevel(level)
    # Avoid duplicate logs if called multiple times
    for h in list(app_logger.handlers):
        app_logger.removeHandler(h)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    app_logger.addHandler(console)

    if log_file:
        log_file = Path(log_file)
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            app_logger.addHandler(file_handler)
            # The file handler wants DEBUG records even if the console doesn't
            app_logger.setLevel(logging.DEBUG)
        except OSError as e:
            warnings.warn(f"Failed to create log file {log_file}: {e}")

    # Do not propagate to root to avoid double-printing
    app_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger under 'matelink' root."""
    base = logging.getLogger("matelink")
    return base.getChild(name)


class LogTemplates:
    """Standard log message templates for consistent logging across modules.

    Example usage:
        logger.info(LogTemplates.FILE_LOADED.format(count=12, path=refs))
    """

    # File operations
    FILE_OPENED = "Opened {kind}: {path}"
    FILE_LOADED = "Loaded {count:,} records from {path}"
    FILE_CREATED = "Wrote {count:,} edges to {path}"

    # Scan progress
    CONTIG_SCAN = "Scanning {contig} ({length:,} bp): head [{head_begin}, {head_end}), tail [{tail_begin}, {tail_end})"
    CONTIG_SKIPPED = "Skipping contig {contig}: {reason}"
    WINDOW_EMPTY = "No alignments in {contig}:[{begin}, {end})"

    # Processing statistics
    PROCESSING_STATS = "Processed {input_count:,} items -> {output_count:,} results"
    FILTERING_STATS = "Filtered: {kept:,} kept, {removed:,} removed ({percent:.1f}% pass rate)"
