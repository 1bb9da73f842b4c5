"""End-to-end tests for matelink.

These tests build real BAM/BAI files with pysam in a temporary directory.

Run with: pytest tests/integration/ -v
"""
