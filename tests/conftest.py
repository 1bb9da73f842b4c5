"""Pytest configuration for matelink tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

READ_LENGTH = 50


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset matelink logger state after each test.

    setup_logging() sets propagate=False, which would break caplog in
    subsequent tests.
    """
    yield
    app_logger = logging.getLogger("matelink")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


def _segment(header, name, tid, pos, mate_tid, mate_pos, first):
    import pysam

    seg = pysam.AlignedSegment(header)
    seg.query_name = name
    seg.query_sequence = "A" * READ_LENGTH
    seg.query_qualities = pysam.qualitystring_to_array("I" * READ_LENGTH)
    flag = 0x1 | (0x40 if first else 0x80)
    if mate_tid < 0:
        flag |= 0x8
    seg.flag = flag
    seg.reference_id = tid
    seg.reference_start = pos
    seg.mapping_quality = 60
    seg.cigartuples = [(0, READ_LENGTH)]
    seg.next_reference_id = mate_tid
    seg.next_reference_start = mate_pos
    seg.template_length = 0
    return seg


@pytest.fixture
def make_bam(tmp_path):
    """Build a coordinate-sorted, indexed BAM.

    Usage::

        bam, bai = make_bam(
            contigs=[("ctgA", 2000), ("ctgB", 2000)],
            pairs=[("p1", "ctgA", 50, "ctgB", 1950)],
        )

    A pair whose second contig is ``None`` is written as a single read with
    an unmapped mate.
    """
    import pysam

    def _make(contigs, pairs, name="aln.bam"):
        bam_path = tmp_path / name
        tids = {contig: i for i, (contig, _) in enumerate(contigs)}
        header = {
            "HD": {"VN": "1.6", "SO": "coordinate"},
            "SQ": [{"SN": contig, "LN": length} for contig, length in contigs],
        }
        with pysam.AlignmentFile(str(bam_path), "wb", header=header) as out:
            segments = []
            for read_name, ctg1, pos1, ctg2, pos2 in pairs:
                tid1 = tids[ctg1]
                if ctg2 is None:
                    segments.append(_segment(out.header, read_name, tid1, pos1, -1, -1, True))
                    continue
                tid2 = tids[ctg2]
                segments.append(_segment(out.header, read_name, tid1, pos1, tid2, pos2, True))
                segments.append(_segment(out.header, read_name, tid2, pos2, tid1, pos1, False))
            segments.sort(key=lambda s: (s.reference_id, s.reference_start))
            for seg in segments:
                out.write(seg)
        pysam.index(str(bam_path))
        return bam_path, Path(f"{bam_path}.bai")

    return _make


@pytest.fixture
def write_references(tmp_path):
    """Write a contig-name list and return its path."""

    def _write(names, name="contigs.txt"):
        path = tmp_path / name
        path.write_text("".join(f"{n}\n" for n in names), encoding="utf-8")
        return path

    return _write
