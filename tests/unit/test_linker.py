"""Tests for EndLinker and link_contigs."""

import logging
from dataclasses import dataclass

import pytest

from matelink.config import Config
from matelink.core import linker as linker_module
from matelink.core.linker import EndLinker, LinkStats, link_contigs
from matelink.core.types import Contig, ContigEnd, Edge
from matelink.exceptions import ContigLookupError, ResourceOpenError

S, E = ContigEnd.START, ContigEnd.END
READ_LENGTH = 50


@dataclass
class FakeRecord:
    query_name: str
    reference_id: int
    reference_start: int
    next_reference_id: int
    next_reference_start: int


class FakeSource:
    """In-memory stand-in for AlignmentSource.

    ``seek`` jumps to the first record overlapping the window and then keeps
    streaming in file order, like an index jump on a sorted BAM.
    """

    def __init__(self, contigs, records):
        self.contigs = list(contigs)
        self.records = sorted(records, key=lambda r: (r.reference_id, r.reference_start))
        self.seeks = []

    def get_tid(self, name):
        for tid, (contig, _) in enumerate(self.contigs):
            if contig == name:
                return tid
        raise ContigLookupError(f"Reference sequence named {name} not known", contig=name)

    def contig(self, tid):
        return Contig(*self.contigs[tid])

    def seek(self, tid, begin, end):
        self.seeks.append((tid, begin, end))
        for i, record in enumerate(self.records):
            if (
                record.reference_id == tid
                and record.reference_start < end
                and record.reference_start + READ_LENGTH > begin
            ):
                return True, iter(self.records[i:])
        return False, iter(())


def _source(contigs, pairs, singles=()):
    tids = {name: i for i, (name, _) in enumerate(contigs)}
    records = []
    for name, ctg1, pos1, ctg2, pos2 in pairs:
        records.append(FakeRecord(name, tids[ctg1], pos1, tids[ctg2], pos2))
        records.append(FakeRecord(name, tids[ctg2], pos2, tids[ctg1], pos1))
    for name, ctg, pos, mate_tid, mate_pos in singles:
        records.append(FakeRecord(name, tids[ctg], pos, mate_tid, mate_pos))
    return FakeSource(contigs, records)


TWO_CONTIGS = [("ctgA", 2000), ("ctgB", 2000)]


class TestEndLinker:
    def test_pair_counted_once_when_both_contigs_listed(self):
        pairs = [(f"p{i}", "ctgA", 50, "ctgB", 1950) for i in range(3)]
        linker = EndLinker(_source(TWO_CONTIGS, pairs))
        graph = linker.link(["ctgA", "ctgB"])

        assert list(graph.iterate()) == [Edge("ctgA", S, "ctgB", E, 3)]
        assert linker.stats.links_added == 3
        assert linker.stats.duplicate_pairs == 3

    def test_pair_counted_from_one_side_only(self):
        pairs = [(f"p{i}", "ctgA", 50, "ctgB", 1950) for i in range(3)]
        graph = EndLinker(_source(TWO_CONTIGS, pairs)).link(["ctgB"])
        assert list(graph.iterate()) == [Edge("ctgA", S, "ctgB", E, 3)]

    def test_interior_mate_discarded(self):
        pairs = [(f"p{i}", "ctgA", 50, "ctgB", 1950) for i in range(3)]
        pairs.append(("p3", "ctgA", 50, "ctgB", 1000))
        linker = EndLinker(_source(TWO_CONTIGS, pairs))
        graph = linker.link(["ctgA", "ctgB"])

        assert graph.count("ctgA", S, "ctgB", E) == 3
        assert len(graph) == 1
        assert linker.stats.interior_discarded == 1

    def test_scans_head_then_tail(self):
        source = _source(TWO_CONTIGS, [])
        EndLinker(source).link(["ctgA"])
        assert source.seeks == [(0, 0, 500), (0, 1500, 2000)]

    def test_window_length_drives_windows_and_classification(self):
        pairs = [("p0", "ctgA", 150, "ctgB", 1750)]
        source = _source(TWO_CONTIGS, pairs)
        graph = EndLinker(source, window_length=300).link(["ctgA"])

        assert source.seeks == [(0, 0, 300), (0, 1700, 2000)]
        assert graph.count("ctgA", S, "ctgB", E) == 1

    def test_tail_window_link(self):
        pairs = [("p0", "ctgA", 1900, "ctgB", 100)]
        graph = EndLinker(_source(TWO_CONTIGS, pairs)).link(["ctgA"])
        assert list(graph.iterate()) == [Edge("ctgA", E, "ctgB", S, 1)]

    def test_same_contig_and_unmapped_mates_ignored(self):
        singles = [
            ("same", "ctgA", 10, 0, 1990),
            ("unmapped", "ctgA", 20, -1, -1),
        ]
        linker = EndLinker(_source(TWO_CONTIGS, [], singles))
        graph = linker.link(["ctgA"])

        assert len(graph) == 0
        assert linker.stats.records_scanned == 2
        assert linker.stats.cross_contig_records == 0

    def test_records_outside_windows_not_scanned(self):
        pairs = [("mid", "ctgA", 1000, "ctgB", 1950)]
        linker = EndLinker(_source(TWO_CONTIGS, pairs))
        graph = linker.link(["ctgA"])
        assert len(graph) == 0
        assert linker.stats.records_scanned == 0

    def test_duplicate_names_in_list_do_not_double_count(self):
        pairs = [("p0", "ctgA", 50, "ctgB", 1950)]
        graph = EndLinker(_source(TWO_CONTIGS, pairs)).link(["ctgA", "ctgA"])
        assert graph.count("ctgA", S, "ctgB", E) == 1

    def test_unknown_contig_aborts(self):
        linker = EndLinker(_source(TWO_CONTIGS, []))
        with pytest.raises(ContigLookupError) as excinfo:
            linker.link(["ctgA", "ghost"])
        assert excinfo.value.contig == "ghost"
        assert isinstance(excinfo.value, LookupError)

    def test_unknown_contig_skipped_when_relaxed(self, caplog):
        pairs = [("p0", "ctgA", 50, "ctgB", 1950)]
        linker = EndLinker(_source(TWO_CONTIGS, pairs), skip_missing=True)
        with caplog.at_level(logging.WARNING, logger="matelink"):
            graph = linker.link(["ghost", "ctgA"])

        assert graph.count("ctgA", S, "ctgB", E) == 1
        assert linker.stats.contigs_skipped == ["ghost"]
        assert linker.stats.contigs_scanned == 1
        assert "Skipping contig ghost" in caplog.text


class TestLinkStats:
    def test_summary_mentions_counts(self):
        stats = LinkStats(contigs_requested=2, contigs_scanned=2, links_added=3)
        summary = stats.summary()
        assert "2/2 contigs scanned" in summary
        assert "3 links added" in summary


class TestLinkContigs:
    def test_missing_reference_list(self, tmp_path):
        cfg = Config(bam=tmp_path / "a.bam", index=tmp_path / "a.bam.bai", references=tmp_path / "x.txt")
        with pytest.raises(ResourceOpenError):
            link_contigs(cfg)

    def test_prunes_after_scan(self, tmp_path, monkeypatch):
        pairs = [(f"p{i}", "ctgA", 50, "ctgB", 1950) for i in range(2)]
        pairs.append(("q0", "ctgA", 1900, "ctgB", 10))
        source = _source(TWO_CONTIGS, pairs)

        class FakeAlignmentSource:
            def __init__(self, bam, index, threads=1):
                pass

            def __enter__(self):
                return source

            def __exit__(self, *exc):
                return None

        monkeypatch.setattr(linker_module, "AlignmentSource", FakeAlignmentSource)
        refs = tmp_path / "refs.txt"
        refs.write_text("ctgA\nctgB\n")

        cfg = Config(bam=tmp_path / "a.bam", index=tmp_path / "a.bam.bai", references=refs)
        cfg.link.lower = 2
        cfg.runtime.enable_progress = False

        graph, stats = link_contigs(cfg)
        assert list(graph.iterate()) == [Edge("ctgA", S, "ctgB", E, 2)]
        assert stats.edges_pruned == 1
