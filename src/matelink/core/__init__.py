"""Linkage core: window scanning, end classification, graph, pruning, output."""

from matelink.core.end_classifier import EndClassifier
from matelink.core.linkage_graph import LinkageGraph
from matelink.core.pruner import prune
from matelink.core.region_scanner import RegionScanner, Window, end_windows
from matelink.core.serializer import format_edge, write_edges
from matelink.core.types import Contig, ContigEnd, ContigEndRef, Edge, EdgeKey, canonical_key

__all__ = [
    "Contig",
    "ContigEnd",
    "ContigEndRef",
    "Edge",
    "EdgeKey",
    "EndClassifier",
    "LinkageGraph",
    "RegionScanner",
    "Window",
    "canonical_key",
    "end_windows",
    "format_edge",
    "prune",
    "write_edges",
]
