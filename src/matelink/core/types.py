"""Shared data types for the linkage core.

Graph nodes are contig ends, identified by a contig name plus a
``ContigEnd`` label. Edges are unordered pairs of nodes; ``EdgeKey`` always
holds them in canonical order (smaller contig name first) so that the same
pair of ends maps to the same counter regardless of observation order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class ContigEnd(Enum):
    """Which terminus of a contig a piece of evidence implicates."""

    START = 0
    END = 1

    @property
    def label(self) -> str:
        return self.name.lower()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Contig:
    """An assembled reference sequence as described by the BAM header."""

    name: str
    length: int

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"Contig length must be non-negative: {self.name}={self.length}")


class ContigEndRef(NamedTuple):
    """A graph node: one end of one contig."""

    contig: str
    end: ContigEnd


class EdgeKey(NamedTuple):
    """Canonical unordered pair of contig ends.

    Build instances with :func:`canonical_key`; ``first.contig`` is always the
    lexicographically smaller contig name.
    """

    first: ContigEndRef
    second: ContigEndRef

    def sort_key(self) -> tuple[str, int, str, int]:
        return (
            self.first.contig,
            self.first.end.value,
            self.second.contig,
            self.second.end.value,
        )


class Edge(NamedTuple):
    """A surviving edge as handed to the serializer."""

    contig_a: str
    end_a: ContigEnd
    contig_b: str
    end_b: ContigEnd
    count: int


def canonical_key(a: ContigEndRef, b: ContigEndRef) -> EdgeKey:
    """Order two contig ends by contig name only, carrying their end labels.

    Raises:
        ValueError: If both ends belong to the same contig (self-links are
            not part of the linkage relation).
    """
    if a.contig == b.contig:
        raise ValueError(f"Self-link on contig {a.contig!r} is not allowed")
    if b.contig < a.contig:
        return EdgeKey(b, a)
    return EdgeKey(a, b)
