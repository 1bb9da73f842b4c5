"""Mate end classification."""

from __future__ import annotations

from typing import Optional

from matelink.constants import DEFAULT_WINDOW_LENGTH
from matelink.core.types import ContigEnd


class EndClassifier:
    """Decide which end of its contig a mate lies at.

    Rules, in order:
        1. ``mate_pos < window_length`` -> START
        2. ``mate_pos > mate_length - window_length`` -> END
        3. otherwise interior, no adjacency evidence (``None``)

    On contigs shorter than ``2 * window_length`` both rules can match; rule 1
    wins.
    """

    def __init__(self, window_length: int = DEFAULT_WINDOW_LENGTH) -> None:
        if window_length < 1:
            raise ValueError(f"window_length must be >= 1, got {window_length}")
        self.window_length = window_length

    def classify(self, mate_pos: int, mate_length: int) -> Optional[ContigEnd]:
        if mate_pos < self.window_length:
            return ContigEnd.START
        if mate_pos > mate_length - self.window_length:
            return ContigEnd.END
        return None
