"""Linkage execution helpers for the CLI."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from matelink.config import Config, load_config
from matelink.core.linker import link_contigs
from matelink.core.serializer import write_edges
from matelink.exceptions import ResourceOpenError
from matelink.utils.logging import LogTemplates, level_from_name, setup_logging


@dataclass
class LinkOptions:
    """Container for options collected from the command line."""

    bam: Optional[Path]
    index: Optional[Path]
    references: Optional[Path]
    output: Optional[Path]  # None means use config or stdout
    config_path: Optional[Path]
    lower: Optional[int]  # None means use config or default
    upper: Optional[int]
    window_length: Optional[int]
    threads: Optional[int]
    skip_missing: bool  # CLI flag: True if --skip-missing provided
    no_progress: bool  # CLI flag: True if --no-progress provided
    log_file: Optional[Path] = None
    verbose: int = 0


def resolve_config(opts: LinkOptions) -> Config:
    """Merge defaults, the optional config file and CLI values (in that order)."""
    cfg = load_config(opts.config_path) if opts.config_path else Config()

    for key in ("bam", "index", "references", "output"):
        value = getattr(opts, key)
        if value is not None:
            setattr(cfg, key, value)

    for key in ("lower", "upper", "window_length"):
        value = getattr(opts, key)
        if value is not None:
            setattr(cfg.link, key, value)

    if opts.threads is not None:
        cfg.threads = opts.threads

    # Flags only ever switch behaviour on/off relative to the config file
    if opts.skip_missing:
        cfg.runtime.skip_missing = True
    if opts.no_progress:
        cfg.runtime.enable_progress = False
    if opts.log_file is not None:
        cfg.runtime.log_file = opts.log_file

    return cfg


def execute_linkage(opts: LinkOptions, logger: logging.Logger) -> int:
    """
    Build, prune and write the linkage graph.

    The edge list is written only after the scan and pruning have finished;
    any error raised before that leaves the result stream untouched.

    Returns:
        Number of edges written

    Raises:
        MateLinkError: On any fatal configuration, input or scan error
    """
    cfg = resolve_config(opts)

    # CLI verbosity wins; otherwise honour the config file
    if opts.verbose == 0:
        setup_logging(
            level=level_from_name(cfg.runtime.log_level),
            log_file=cfg.runtime.log_file,
        )

    cfg.validate()
    if 0 <= cfg.link.upper < cfg.link.lower:
        logger.warning(
            f"Lower bound ({cfg.link.lower}) exceeds upper bound ({cfg.link.upper}); "
            "every edge will be pruned"
        )
    logger.debug(f"Effective configuration: {cfg.to_dict()}")

    graph, stats = link_contigs(cfg, logger=logger)
    logger.info(
        LogTemplates.PROCESSING_STATS.format(
            input_count=stats.links_added, output_count=len(graph)
        )
    )

    if cfg.output is None:
        return write_edges(graph.iterate(), sys.stdout)

    try:
        with open(cfg.output, "w", encoding="utf-8") as handle:
            written = write_edges(graph.iterate(), handle)
    except OSError as exc:
        raise ResourceOpenError(
            f"Could not open {cfg.output} for writing: {exc}", path=cfg.output
        ) from exc
    logger.info(LogTemplates.FILE_CREATED.format(count=written, path=cfg.output))
    return written
