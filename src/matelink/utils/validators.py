"""Validation utilities for matelink."""

from __future__ import annotations

import importlib
from typing import List

# Import name -> distribution name
REQUIRED_MODULES = {
    "pysam": "pysam",
    "click": "click",
    "yaml": "PyYAML",
    "tqdm": "tqdm",
}


def validate_installation() -> List[str]:
    """
    Validate that the Python modules matelink relies on can be imported.

    Returns:
        List of validation issues (empty if all good)
    """
    issues = []
    for module, dist in REQUIRED_MODULES.items():
        try:
            importlib.import_module(module)
        except ImportError:
            issues.append(f"Missing Python module: {module} (install '{dist}')")
    return issues
