#!/usr/bin/env python
"""Enforce declarative config modules.

Modules under envkit/config/ hold constants and env reads only. Parsing
rules, classes and helpers belong in envkit/env/ or envkit/clock/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import config_modules, rel, report, parse_source  # noqa: E402

_FORBIDDEN = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)


def main() -> int:
    violations: list[str] = []

    for py_file in config_modules():
        result = parse_source(py_file)
        if result is None:
            continue
        _source, tree = result

        for node in tree.body:
            if isinstance(node, _FORBIDDEN):
                kind = "class" if isinstance(node, ast.ClassDef) else "def"
                violations.append(f"  {rel(py_file)}: {kind} {node.name} (line {node.lineno})")

    return report("No-config-functions violations (config/ must be declarative)", violations)


if __name__ == "__main__":
    sys.exit(main())
