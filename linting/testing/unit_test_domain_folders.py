#!/usr/bin/env python
"""Enforce that unit test files live inside domain subfolders.

Tests must be at ``tests/unit/<domain>/foo.py``, never directly at
``tests/unit/foo.py``, and a domain folder may not nest further.
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import UNIT_DIR, iter_python_files, rel, report  # noqa: E402


def main() -> int:
    violations: list[str] = []

    for py_file in iter_python_files(UNIT_DIR):
        if py_file.name == "__init__.py":
            continue
        depth = len(py_file.relative_to(UNIT_DIR).parts)
        if depth == 1:
            violations.append(f"  {rel(py_file)}: must be inside a domain subfolder (tests/unit/<domain>/)")
        elif depth > 2:
            violations.append(f"  {rel(py_file)}: domain folders must be one level deep")

    return report("Unit-test-domain-folders violations", violations)


if __name__ == "__main__":
    sys.exit(main())
