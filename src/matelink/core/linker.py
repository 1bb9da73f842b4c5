"""
End Linker - build the contig-end linkage graph from indexed alignments.

For every contig of interest the head window and then the tail window are
scanned. Each record whose mate is mapped to a different contig is turned
into one piece of evidence: the scanned end (from the window) is linked to
the mate's end (from :class:`EndClassifier`). Mates landing in the interior
of their contig carry no adjacency information and are discarded.

A mate pair is counted once per edge. When both contigs are of interest the
pair is seen twice (once from each read); the second sighting is recognised
by read name and ignored.

Any fatal error aborts the whole run. With ``skip_missing`` a contig name
that is not in the BAM header is logged and skipped instead.

Key features:
- Strict sequential scan: contigs in list order, head window before tail
- Single writer to the graph; the graph is read only after the scan
- Scan statistics collected in :class:`LinkStats`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from matelink.config import Config
from matelink.constants import DEFAULT_WINDOW_LENGTH, UNMAPPED_REFERENCE_ID
from matelink.core.alignment_source import AlignmentSource
from matelink.core.end_classifier import EndClassifier
from matelink.core.linkage_graph import LinkageGraph
from matelink.core.pruner import prune
from matelink.core.reference_list import read_reference_names
from matelink.core.region_scanner import RegionScanner, Window, end_windows
from matelink.core.types import ContigEndRef, EdgeKey, canonical_key
from matelink.exceptions import ContigLookupError
from matelink.utils.logging import LogTemplates, get_logger
from matelink.utils.progress import iter_progress


@dataclass
class LinkStats:
    """Statistics for one linkage run."""

    contigs_requested: int = 0
    contigs_scanned: int = 0
    contigs_skipped: list[str] = field(default_factory=list)
    records_scanned: int = 0
    cross_contig_records: int = 0
    interior_discarded: int = 0
    duplicate_pairs: int = 0
    links_added: int = 0
    edges_pruned: int = 0

    def summary(self) -> str:
        return (
            f"{self.contigs_scanned}/{self.contigs_requested} contigs scanned, "
            f"{self.records_scanned:,} records in windows, "
            f"{self.cross_contig_records:,} with mate on another contig, "
            f"{self.interior_discarded:,} interior mates discarded, "
            f"{self.duplicate_pairs:,} repeat sightings, "
            f"{self.links_added:,} links added"
        )


class EndLinker:
    """Accumulate contig-end adjacency evidence from an alignment source.

    Every counted sighting is remembered as ``(query_name, edge key)`` for the
    lifetime of the linker, so memory grows with the amount of evidence.
    """

    def __init__(
        self,
        source: AlignmentSource,
        window_length: int = DEFAULT_WINDOW_LENGTH,
        skip_missing: bool = False,
        show_progress: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.source = source
        self.window_length = window_length
        self.skip_missing = skip_missing
        self.show_progress = show_progress
        self.logger = logger or get_logger(self.__class__.__name__)

        self.scanner = RegionScanner(source, logger=self.logger)
        self.classifier = EndClassifier(window_length)
        self.graph = LinkageGraph()
        self.stats = LinkStats()
        self._seen_pairs: set[tuple[str, EdgeKey]] = set()

    def link(self, contig_names: Iterable[str]) -> LinkageGraph:
        """Scan every listed contig and return the filled graph.

        Raises:
            ContigLookupError: A listed name is unknown (unless ``skip_missing``)
            SeekError: The index cannot be used
            RecordReadError: A record cannot be decoded
        """
        names = list(contig_names)
        self.stats.contigs_requested += len(names)

        for name in iter_progress(names, total=len(names), desc="Contigs", enabled=self.show_progress):
            try:
                tid = self.source.get_tid(name)
            except ContigLookupError as exc:
                if not self.skip_missing:
                    raise
                self.logger.warning(LogTemplates.CONTIG_SKIPPED.format(contig=name, reason=exc))
                self.stats.contigs_skipped.append(name)
                continue
            self.scan_contig(tid)

        self.logger.info(self.stats.summary())
        return self.graph

    def scan_contig(self, tid: int) -> None:
        """Scan the head and then the tail window of one contig."""
        contig = self.source.contig(tid)
        head, tail = end_windows(contig.length, self.window_length)
        self.logger.debug(
            LogTemplates.CONTIG_SCAN.format(
                contig=contig.name,
                length=contig.length,
                head_begin=head.begin,
                head_end=head.stop,
                tail_begin=tail.begin,
                tail_end=tail.stop,
            )
        )
        for window in (head, tail):
            self._scan_window(tid, contig.name, window)
        self.stats.contigs_scanned += 1

    def _scan_window(self, tid: int, name: str, window: Window) -> None:
        for record in self.scanner.scan(tid, window.begin, window.stop, label=name):
            self.stats.records_scanned += 1

            mate_tid = record.next_reference_id
            if mate_tid == UNMAPPED_REFERENCE_ID or mate_tid == tid:
                continue
            self.stats.cross_contig_records += 1

            mate = self.source.contig(mate_tid)
            mate_end = self.classifier.classify(record.next_reference_start, mate.length)
            if mate_end is None:
                self.stats.interior_discarded += 1
                continue

            key = canonical_key(ContigEndRef(name, window.end), ContigEndRef(mate.name, mate_end))
            sighting = (record.query_name, key)
            if sighting in self._seen_pairs:
                self.stats.duplicate_pairs += 1
                continue
            self._seen_pairs.add(sighting)

            self.graph.add_link(name, window.end, mate.name, mate_end)
            self.stats.links_added += 1


def link_contigs(cfg: Config, logger: Optional[logging.Logger] = None) -> tuple[LinkageGraph, LinkStats]:
    """Run the complete scan and pruning described by ``cfg``.

    The returned graph is already pruned. Nothing is written here; callers
    serialize only once this function has returned successfully.
    """
    logger = logger or get_logger("linker")

    names = read_reference_names(cfg.references)
    logger.info(LogTemplates.FILE_LOADED.format(count=len(names), path=cfg.references))

    with AlignmentSource(cfg.bam, cfg.index, threads=cfg.performance.threads) as source:
        linker = EndLinker(
            source,
            window_length=cfg.link.window_length,
            skip_missing=cfg.runtime.skip_missing,
            show_progress=cfg.runtime.enable_progress,
            logger=logger,
        )
        graph = linker.link(names)

    linker.stats.edges_pruned = prune(graph, cfg.link.lower, cfg.link.upper, logger=logger)
    return graph, linker.stats
