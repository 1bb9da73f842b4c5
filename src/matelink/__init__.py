"""matelink: derive a scaffolding linkage graph from mate-pair alignments."""

from matelink.__version__ import __version__
from matelink.core.types import Contig, ContigEnd, ContigEndRef, Edge, EdgeKey
from matelink.core.linkage_graph import LinkageGraph

__all__ = [
    "__version__",
    "Contig",
    "ContigEnd",
    "ContigEndRef",
    "Edge",
    "EdgeKey",
    "LinkageGraph",
]
