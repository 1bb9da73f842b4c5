"""Reading the list of contigs of interest."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from matelink.exceptions import ResourceOpenError


def read_reference_names(path: Union[str, Path]) -> list[str]:
    """Read newline-delimited contig names.

    Trailing whitespace is stripped and blank lines are skipped; names are
    otherwise taken as-is, in file order, duplicates included.

    Raises:
        ResourceOpenError: If the file cannot be read
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.rstrip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceOpenError(f"Cannot open file of references {path}: {exc}", path=path) from exc
