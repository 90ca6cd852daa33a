#!/usr/bin/env python
"""Enforce that environment reads go through the accessor layer.

Only envkit/env/ (the accessor) and envkit/config/ (declarative defaults)
may touch ``os.environ`` or ``os.getenv``. Everything else reads
configuration through ``EnvAccessor`` so quoting and failure rules stay
uniform.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import PACKAGE_DIR, iter_python_files, rel, report, parse_source  # noqa: E402

_ALLOWED_DIRS = (PACKAGE_DIR / "env", PACKAGE_DIR / "config")
_ENV_ATTRS = {"environ", "getenv", "putenv", "unsetenv"}


def _is_allowed(path: Path) -> bool:
    return any(allowed in path.parents for allowed in _ALLOWED_DIRS)


def main() -> int:
    violations: list[str] = []

    for py_file in iter_python_files(PACKAGE_DIR):
        if _is_allowed(py_file):
            continue
        result = parse_source(py_file)
        if result is None:
            continue
        _source, tree = result

        for node in ast.walk(tree):
            if (
                isinstance(node, ast.Attribute)
                and node.attr in _ENV_ATTRS
                and isinstance(node.value, ast.Name)
                and node.value.id == "os"
            ):
                violations.append(f"  {rel(py_file)}: os.{node.attr} (line {node.lineno})")

    return report("No-direct-environ violations (use envkit.env)", violations)


if __name__ == "__main__":
    sys.exit(main())
