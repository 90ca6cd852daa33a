"""Unit tests for the pure string rules behind the env accessors."""

from __future__ import annotations

import pytest

from envkit.env.parsing import (
    format_bool,
    parse_bool,
    parse_uint32,
    split_array,
    strip_double_quotes,
    strip_quote_layers,
)

# --- strip_quote_layers ---


def test_strip_quote_layers_plain_value_unchanged() -> None:
    assert strip_quote_layers("test") == "test"


def test_strip_quote_layers_double_quotes() -> None:
    assert strip_quote_layers('"test"') == "test"


def test_strip_quote_layers_nested_mixed_quotes() -> None:
    assert strip_quote_layers("\"'test'\"") == "test"


def test_strip_quote_layers_triple_nesting() -> None:
    assert strip_quote_layers("'\"'value'\"'") == "value"


def test_strip_quote_layers_keeps_inner_quotes() -> None:
    assert strip_quote_layers("\"it's\"") == "it's"


def test_strip_quote_layers_only_quotes_becomes_empty() -> None:
    assert strip_quote_layers("\"''\"") == ""


# --- strip_double_quotes ---


def test_strip_double_quotes_trims_runs() -> None:
    assert strip_double_quotes('""value""') == "value"


def test_strip_double_quotes_leaves_single_quotes() -> None:
    assert strip_double_quotes("'value'") == "'value'"


# --- parse_bool / format_bool ---


def test_parse_bool_case_insensitive() -> None:
    assert parse_bool("TrUe") is True
    assert parse_bool("TRUE") is True


def test_parse_bool_rejects_other_truthy_spellings() -> None:
    assert parse_bool("1") is False
    assert parse_bool("yes") is False
    assert parse_bool(" true") is False


def test_format_bool_lowercase() -> None:
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


# --- parse_uint32 ---


def test_parse_uint32_valid() -> None:
    assert parse_uint32("42") == 42


def test_parse_uint32_leading_zeros() -> None:
    assert parse_uint32("007") == 7


def test_parse_uint32_max_value() -> None:
    assert parse_uint32("4294967295") == 4294967295


def test_parse_uint32_overflow_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32("4294967296")


def test_parse_uint32_negative_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32("-1")


def test_parse_uint32_plus_sign_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32("+1")


def test_parse_uint32_whitespace_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32(" 1")


def test_parse_uint32_underscore_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32("1_000")


def test_parse_uint32_empty_raises() -> None:
    with pytest.raises(ValueError):
        parse_uint32("")


def test_split_array_keeps_file_separator_chars() -> None:
    assert split_array("\x1c a \x1c") == ["\x1c a \x1c"]
