"""Version information for matelink."""

__version__ = "0.1.0"
__license__ = "GPL-2.0"
__description__ = "Contig-end linkage graphs from paired-end alignment evidence"
