"""
Region Scanner - records confined to one contig window.

Given an open alignment source, yields the records of a single contig whose
start position lies in ``[begin, end)``, in file order. Relies on the input
being coordinate sorted: scanning stops at the first record that leaves the
contig or reaches ``end``.
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Optional, Protocol

from matelink.constants import UNMAPPED_REFERENCE_ID
from matelink.core.types import ContigEnd
from matelink.exceptions import RecordReadError
from matelink.utils.logging import LogTemplates, get_logger


class Window(NamedTuple):
    """A half-open scan window at one contig end."""

    end: ContigEnd
    begin: int
    stop: int


class RecordSource(Protocol):
    """What the scanner needs from an alignment source."""

    def seek(self, tid: int, begin: int, end: int) -> tuple[bool, Iterator]: ...


def end_windows(length: int, window_length: int) -> tuple[Window, Window]:
    """Return the head and tail windows of a contig.

    Head is ``[0, window_length)`` and tail is
    ``[length - window_length, length)``, both clipped to the contig. On a
    contig shorter than twice ``window_length`` the two windows overlap.
    """
    # Head covers positions 0..window_length-1 inclusive, the same positions
    # the Start rule accepts for a mate.
    head = Window(ContigEnd.START, 0, min(window_length, length))
    tail = Window(ContigEnd.END, max(0, length - window_length), length)
    return head, tail


class RegionScanner:
    """Scan contig windows of an indexed alignment source."""

    def __init__(self, source: RecordSource, logger: Optional[logging.Logger] = None) -> None:
        self.source = source
        self.logger = logger or get_logger(self.__class__.__name__)

    def scan(self, tid: int, begin: int, end: int, label: Optional[str] = None) -> Iterator:
        """Yield records on ``tid`` starting in ``[begin, end)``.

        Args:
            tid: Reference id to scan
            begin: First position of the window (0-based, inclusive)
            end: End of the window (exclusive)
            label: Contig name used in log messages

        Raises:
            SeekError: Propagated from the source when the index is unusable
            RecordReadError: If a record cannot be decoded mid-scan
        """
        if end <= begin:
            return

        has_alignments, records = self.source.seek(tid, begin, end)
        if not has_alignments:
            self.logger.debug(
                LogTemplates.WINDOW_EMPTY.format(contig=label or tid, begin=begin, end=end)
            )
            return

        try:
            for record in records:
                rid = record.reference_id
                if rid == UNMAPPED_REFERENCE_ID or rid != tid or record.reference_start >= end:
                    break
                # Overlapping reads that start left of the window
                if record.reference_start < begin:
                    continue
                yield record
        except OSError as exc:
            raise RecordReadError(f"Could not read record from BAM file: {exc}") from exc
