"""Unit tests that run the structural lint checks against the repo."""

from __future__ import annotations

from pathlib import Path

import pytest

from linting.modules import no_config_cross_imports, no_config_functions
from linting.runtime import no_direct_environ
from linting.testing import no_test_file_prefix, unit_test_domain_folders


def test_config_modules_are_declarative() -> None:
    assert no_config_functions.main() == 0


def test_config_modules_do_not_import_envkit() -> None:
    assert no_config_cross_imports.main() == 0


def test_environ_reads_stay_in_accessor_layer() -> None:
    assert no_direct_environ.main() == 0


def test_unit_tests_use_plain_filenames() -> None:
    assert no_test_file_prefix.main() == 0


def test_unit_tests_live_in_domain_folders() -> None:
    assert unit_test_domain_folders.main() == 0


def test_domain_folder_check_reports_flat_file(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    (tmp_path / "env").mkdir()
    (tmp_path / "env" / "ok.py").write_text("", encoding="utf-8")
    (tmp_path / "flat.py").write_text("", encoding="utf-8")
    monkeypatch.setattr(unit_test_domain_folders, "UNIT_DIR", tmp_path)
    assert unit_test_domain_folders.main() == 1
    assert "flat.py" in capsys.readouterr().err


def test_config_function_check_reports_def(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    module = tmp_path / "bad.py"
    module.write_text("def helper():\n    return 1\n", encoding="utf-8")
    monkeypatch.setattr(no_config_functions, "config_modules", lambda: [module])
    assert no_config_functions.main() == 1
    assert "def helper" in capsys.readouterr().err
