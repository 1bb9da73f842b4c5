"""
LinkageGraph - weighted adjacency between contig ends.

Maps each canonical unordered pair of contig ends to the number of mate
pairs supporting it. The graph is filled during the scan phase by a single
writer and is only read (pruned, iterated) once scanning is complete.
"""

from __future__ import annotations

from typing import Iterator

from matelink.core.types import ContigEnd, ContigEndRef, Edge, EdgeKey, canonical_key


class LinkageGraph:
    """Evidence counts keyed by canonical contig-end pairs."""

    def __init__(self) -> None:
        self._counts: dict[EdgeKey, int] = {}

    def __len__(self) -> int:
        return len(self._counts)

    def add_link(
        self,
        contig_a: str,
        end_a: ContigEnd,
        contig_b: str,
        end_b: ContigEnd,
    ) -> EdgeKey:
        """Record one supporting mate pair between two contig ends.

        Argument order does not matter: ``add_link(A, eA, B, eB)`` and
        ``add_link(B, eB, A, eA)`` update the same counter.

        Returns:
            The canonical key that was incremented
        """
        key = canonical_key(ContigEndRef(contig_a, end_a), ContigEndRef(contig_b, end_b))
        self._counts[key] = self._counts.get(key, 0) + 1
        return key

    def count(
        self,
        contig_a: str,
        end_a: ContigEnd,
        contig_b: str,
        end_b: ContigEnd,
    ) -> int:
        """Return the evidence count for a pair of ends (0 if absent)."""
        key = canonical_key(ContigEndRef(contig_a, end_a), ContigEndRef(contig_b, end_b))
        return self._counts.get(key, 0)

    def remove_links(self, lower: int = 3, upper: int = -1) -> int:
        """Drop edges whose count falls outside the active bounds.

        An edge is removed when ``count < lower`` (only if ``lower >= 0``) or
        ``count > upper`` (only if ``upper >= 0``).

        Args:
            lower: Minimum count to keep; negative disables the bound
            upper: Maximum count to keep; negative disables the bound

        Returns:
            Number of edges removed
        """
        doomed = [
            key
            for key, count in self._counts.items()
            if (lower >= 0 and count < lower) or (upper >= 0 and count > upper)
        ]
        for key in doomed:
            del self._counts[key]
        return len(doomed)

    def iterate(self) -> Iterator[Edge]:
        """Yield edges ascending by canonical key (name, end, name, end)."""
        for key in sorted(self._counts, key=EdgeKey.sort_key):
            yield Edge(
                key.first.contig,
                key.first.end,
                key.second.contig,
                key.second.end,
                self._counts[key],
            )

    def __iter__(self) -> Iterator[Edge]:
        return self.iterate()

    def total_evidence(self) -> int:
        """Sum of counts across all edges."""
        return sum(self._counts.values())
