"""Unit tests for the current-time accessors."""

from __future__ import annotations

import time
from types import SimpleNamespace

import numpy as np
import pytest

import envkit.clock.timestamp as timestamp_mod
from envkit.clock import (
    from_epoch_text,
    milliseconds_since_epoch,
    nanoseconds_since_epoch,
    now,
    seconds_since_epoch,
    to_epoch_text,
)

_FIXED_NS = 1718461800123456789


def test_now_is_nanosecond_datetime64() -> None:
    value = now()
    assert isinstance(value, np.datetime64)
    assert np.datetime_data(value.dtype)[0] == "ns"


def test_now_round_trips_through_text() -> None:
    value = now()
    assert from_epoch_text(to_epoch_text(value)) == value


def test_now_tracks_wall_clock() -> None:
    before = time.time_ns()
    value = int(now().astype(np.int64))
    after = time.time_ns()
    assert before <= value <= after


def test_fixed_clock_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(timestamp_mod, "time", SimpleNamespace(time_ns=lambda: _FIXED_NS))
    assert nanoseconds_since_epoch() == _FIXED_NS
    assert milliseconds_since_epoch() == 1718461800123
    assert seconds_since_epoch() == 1718461800
    assert to_epoch_text(now()) == "2024-06-15T14:30:00.123456789Z"


def test_units_agree_within_skew() -> None:
    seconds = seconds_since_epoch()
    millis = milliseconds_since_epoch()
    nanos = nanoseconds_since_epoch()
    assert millis // 1000 - seconds in (0, 1)
    assert nanos // 1_000_000 >= millis
