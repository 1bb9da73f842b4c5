"""Shared Click options for the matelink CLI.

Input paths are plain ``click.Path`` values without ``exists=True``: an
unreadable input is a fatal run error (exit 1) reported by the core, not a
usage error.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, TypeVar

import click

F = TypeVar("F", bound=Callable[..., None])


def bam_option(func: F) -> F:
    """Coordinate-sorted BAM option."""
    return click.option(
        "-b",
        "--bam",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Coordinate-sorted BAM file",
    )(func)


def index_option(func: F) -> F:
    """BAI index option."""
    return click.option(
        "-x",
        "--index",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="BAI index of the BAM file",
    )(func)


def references_option(func: F) -> F:
    """Contigs-of-interest list option."""
    return click.option(
        "-r",
        "--references",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="File with one contig name per line",
    )(func)


def output_option(func: F) -> F:
    """Edge list output option."""
    return click.option(
        "-o",
        "--output",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Edge list output file [default: stdout]",
    )(func)


def config_option(func: F) -> F:
    """Configuration file option."""
    return click.option(
        "-c",
        "--config",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Configuration file (YAML)",
    )(func)


def lower_option(func: F) -> F:
    """Lower count bound option."""
    return click.option(
        "-l",
        "--lower",
        type=int,
        default=None,
        help="Drop edges with fewer supporting pairs; negative disables [default: 3]",
    )(func)


def upper_option(func: F) -> F:
    """Upper count bound option."""
    return click.option(
        "-u",
        "--upper",
        type=int,
        default=None,
        help="Drop edges with more supporting pairs; negative disables [default: -1]",
    )(func)


def window_length_option(func: F) -> F:
    """End window length option."""
    return click.option(
        "-w",
        "--window-length",
        type=int,
        default=None,
        help="Contig end window length in bp [default: 500]",
    )(func)


def threads_option(func: F) -> F:
    """Threads option."""
    return click.option(
        "-t",
        "--threads",
        type=int,
        default=None,
        help="BAM decompression threads [default: 1]",
    )(func)


def verbose_option(func: F) -> F:
    """Verbosity option (-v/--verbose)."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v for INFO, -vv for DEBUG)",
    )(func)


def log_file_option(func: F) -> F:
    """Log file option."""
    return click.option(
        "--log-file",
        type=click.Path(dir_okay=False, path_type=Path),
        help="Path for log file output",
    )(func)
