#!/usr/bin/env python
"""Enforce that config modules stay leaf modules.

A config module may import the standard library but nothing from envkit:
neither a sibling config module nor a runtime package. The runtime packages
import config, so any import in the other direction risks a cycle.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shared import config_modules, rel, report, parse_source  # noqa: E402


def _is_package_import(node: ast.ImportFrom) -> bool:
    if node.level > 0:
        return True
    return (node.module or "").split(".")[0] == "envkit"


def main() -> int:
    violations: list[str] = []

    for py_file in config_modules():
        result = parse_source(py_file)
        if result is None:
            continue
        _source, tree = result

        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and _is_package_import(node):
                target = "." * node.level + (node.module or "")
                violations.append(f"  {rel(py_file)}: from {target} import ... (line {node.lineno})")

    return report("No-config-cross-imports violations (config/ must not import envkit)", violations)


if __name__ == "__main__":
    sys.exit(main())
