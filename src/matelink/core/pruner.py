"""Threshold pruning of a finished linkage graph."""

from __future__ import annotations

import logging
from typing import Optional

from matelink.constants import DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND
from matelink.core.linkage_graph import LinkageGraph
from matelink.utils.logging import LogTemplates, get_logger


def prune(
    graph: LinkageGraph,
    lower: int = DEFAULT_LOWER_BOUND,
    upper: int = DEFAULT_UPPER_BOUND,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Apply count bounds to ``graph`` in place and return the number removed."""
    logger = logger or get_logger("pruner")

    before = len(graph)
    evidence = graph.total_evidence()
    removed = graph.remove_links(lower, upper)
    kept = before - removed

    logger.debug(
        f"Pruning with lower={lower if lower >= 0 else 'off'}, "
        f"upper={upper if upper >= 0 else 'off'}, "
        f"{before:,} edges carrying {evidence:,} pairs"
    )
    if before:
        logger.info(
            LogTemplates.FILTERING_STATS.format(
                kept=kept, removed=removed, percent=kept / before * 100
            )
        )
    return removed
