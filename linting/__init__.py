"""Custom structural lint checks for envkit.

Package layout
--------------
shared.py           Shared helpers (path constants, file iteration, parsing,
                    violation reporting) used by every linter.

modules/            Config-module purity rules
    no_config_functions.py      Config modules must be purely declarative.
    no_config_cross_imports.py  Config modules must not import envkit.

runtime/            Runtime module hygiene rules
    no_direct_environ.py        Only env/ and config/ may read os.environ.

testing/            Test file placement and naming rules
    unit_test_domain_folders.py Unit tests must live in domain subfolders.
    no_test_file_prefix.py      Test filenames must not use the test_ prefix.

Each module exposes ``main() -> int`` and can be run as a script.
"""
