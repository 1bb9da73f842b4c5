"""
Alignment Source - indexed BAM access through pysam.

Wraps a coordinate-sorted BAM and its BAI index behind the small surface the
linkage core needs: name <-> id resolution, contig lengths from the header,
and seek-by-interval returning a presence flag plus a record iterator.

Records are expected to be sorted ascending by (reference id, position) and
grouped contiguously by reference id. This is an external contract of the
input (``samtools sort``) and is not re-verified here.
"""

from __future__ import annotations

import itertools
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import pysam

from matelink.core.types import Contig
from matelink.exceptions import (
    ContigLookupError,
    RecordReadError,
    ResourceOpenError,
    SeekError,
)
from matelink.utils.logging import LogTemplates, get_logger


class AlignmentSource:
    """Random-access reader over an indexed BAM file."""

    def __init__(
        self,
        bam_path: Union[str, Path],
        index_path: Union[str, Path],
        threads: int = 1,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.bam_path = Path(bam_path)
        self.index_path = Path(index_path)
        self.threads = threads
        self.logger = logger or get_logger(self.__class__.__name__)
        self._bam: Optional[pysam.AlignmentFile] = None

    # ---- lifecycle ----
    def open(self) -> "AlignmentSource":
        """Open the BAM and load its index.

        Raises:
            ResourceOpenError: If either file is missing or unreadable
        """
        if self._bam is not None:
            return self

        if not self.bam_path.is_file():
            raise ResourceOpenError(
                f"Could not open {self.bam_path} for reading", path=self.bam_path
            )
        if not self.index_path.is_file():
            raise ResourceOpenError(
                f"Could not read BAI index file {self.index_path}", path=self.index_path
            )

        try:
            bam = pysam.AlignmentFile(
                str(self.bam_path),
                "rb",
                index_filename=str(self.index_path),
                threads=self.threads,
            )
        except (OSError, ValueError) as exc:
            raise ResourceOpenError(
                f"Could not open {self.bam_path} with index {self.index_path}: {exc}",
                path=self.bam_path,
            ) from exc

        if not bam.has_index():
            bam.close()
            raise ResourceOpenError(
                f"Could not read BAI index file {self.index_path}", path=self.index_path
            )

        self._bam = bam
        self.logger.debug(LogTemplates.FILE_OPENED.format(kind="alignment file", path=self.bam_path))
        self.logger.debug(LogTemplates.FILE_OPENED.format(kind="index", path=self.index_path))
        return self

    def close(self) -> None:
        if self._bam is not None:
            self._bam.close()
            self._bam = None

    def __enter__(self) -> "AlignmentSource":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def bam(self) -> pysam.AlignmentFile:
        if self._bam is None:
            raise RuntimeError("AlignmentSource is not open")
        return self._bam

    # ---- header ----
    @property
    def references(self) -> tuple[str, ...]:
        return tuple(self.bam.references)

    def get_tid(self, name: str) -> int:
        """Translate a reference name to its numeric id.

        Raises:
            ContigLookupError: If the name is not in the header
        """
        tid = self.bam.get_tid(name)
        if tid < 0:
            raise ContigLookupError(f"Reference sequence named {name} not known", contig=name)
        return tid

    def contig(self, tid: int) -> Contig:
        """Return name and length for a reference id."""
        return Contig(self.bam.get_reference_name(tid), self.bam.lengths[tid])

    # ---- records ----
    def seek(self, tid: int, begin: int, end: int) -> tuple[bool, Iterator[pysam.AlignedSegment]]:
        """Jump to ``[begin, end)`` on reference ``tid``.

        Returns:
            ``(has_alignments, records)``; an empty window yields
            ``(False, <empty iterator>)`` and is not an error.

        Raises:
            SeekError: If the index cannot be used for this interval
            RecordReadError: If the first record cannot be decoded
        """
        name = self.bam.get_reference_name(tid)
        try:
            records = self.bam.fetch(name, begin, end)
        except (OSError, ValueError) as exc:
            raise SeekError(f"Could not jump to {name}:{begin}-{end}: {exc}") from exc

        try:
            first = next(records, None)
        except OSError as exc:
            raise RecordReadError(f"Could not read record from BAM file {self.bam_path}: {exc}") from exc

        if first is None:
            return False, iter(())
        return True, itertools.chain([first], records)
