"""Unified constants for matelink.

Defaults shared by the configuration layer, the CLI and the core scan.
"""

# ================== Linkage Defaults ==================

# Length of the terminal window scanned at each contig end. The same value
# sets the mate end-classification thresholds.
DEFAULT_WINDOW_LENGTH: int = 500

# Edges supported by fewer pairs than this are pruned (negative disables)
DEFAULT_LOWER_BOUND: int = 3

# Edges supported by more pairs than this are pruned (negative disables)
DEFAULT_UPPER_BOUND: int = -1


# ================== Alignment Constants ==================

# Reference id used by the BAM format for "no reference"
UNMAPPED_REFERENCE_ID: int = -1
