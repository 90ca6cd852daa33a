"""Shared utilities for custom structural linters.

Provides common path constants, file iteration, source parsing, and
violation reporting so individual linter modules stay focused on their
single rule.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

PACKAGE_DIR = ROOT / "envkit"
CONFIG_DIR = PACKAGE_DIR / "config"
TESTS_DIR = ROOT / "tests"
UNIT_DIR = TESTS_DIR / "unit"


def rel(path: Path) -> str:
    """Return *path* relative to the project root as a string."""
    try:
        return str(path.relative_to(ROOT))
    except ValueError:
        return str(path)


def iter_python_files(*dirs: Path) -> list[Path]:
    """Return sorted .py files under *dirs*, skipping ``__pycache__``."""
    files: list[Path] = []
    for d in dirs:
        if not d.is_dir():
            continue
        for py in sorted(d.rglob("*.py")):
            if "__pycache__" in py.parts:
                continue
            files.append(py)
    return files


def config_modules() -> list[Path]:
    """Return config modules, excluding the re-exporting ``__init__``."""
    if not CONFIG_DIR.is_dir():
        return []
    return [p for p in sorted(CONFIG_DIR.glob("*.py")) if p.name != "__init__.py"]


def parse_source(filepath: Path) -> tuple[str, ast.Module] | None:
    """Read and parse a Python file, returning ``(source, tree)`` or ``None``."""
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    try:
        tree = ast.parse(source, filename=str(filepath))
    except SyntaxError:
        return None

    return source, tree


def report(header: str, violations: list[str]) -> int:
    """Print *violations* to stderr under *header* and return an exit code."""
    if not violations:
        return 0
    print(f"{header}:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1
