"""Tests for reading the contig name list."""

import pytest

from matelink.core.reference_list import read_reference_names
from matelink.exceptions import ResourceOpenError


def test_reads_names_in_order(tmp_path):
    path = tmp_path / "refs.txt"
    path.write_text("ctgB\nctgA\nctgB\n")
    assert read_reference_names(path) == ["ctgB", "ctgA", "ctgB"]


def test_strips_line_endings_and_blank_lines(tmp_path):
    path = tmp_path / "refs.txt"
    path.write_bytes(b"ctgA\r\n\r\nctgB  \n\n")
    assert read_reference_names(path) == ["ctgA", "ctgB"]


def test_last_line_without_newline(tmp_path):
    path = tmp_path / "refs.txt"
    path.write_text("ctgA\nctgB")
    assert read_reference_names(path) == ["ctgA", "ctgB"]


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(ResourceOpenError) as excinfo:
        read_reference_names(missing)
    assert excinfo.value.path == missing
    assert "nope.txt" in str(excinfo.value)
