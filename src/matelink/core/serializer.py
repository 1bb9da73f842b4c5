"""Edge-list rendering.

One line per edge::

    contigA<TAB>contigB<TAB>count<TAB>endA endB

where the end labels are ``start`` or ``end``.
"""

from __future__ import annotations

from typing import Iterable, TextIO

from matelink.core.types import Edge


def format_edge(edge: Edge) -> str:
    """Render a single edge without the trailing newline."""
    return f"{edge.contig_a}\t{edge.contig_b}\t{edge.count}\t{edge.end_a.label} {edge.end_b.label}"


def write_edges(edges: Iterable[Edge], handle: TextIO) -> int:
    """Write edges to ``handle`` in the given order and return the line count."""
    written = 0
    for edge in edges:
        handle.write(format_edge(edge) + "\n")
        written += 1
    return written
