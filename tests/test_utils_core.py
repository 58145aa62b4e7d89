from __future__ import annotations

import time
from datetime import UTC, datetime

import pytest

from uslug.util.errors import (
    ClockUnavailableError,
    ConfigError,
    InvalidParameterError,
    RandomSourceUnavailableError,
    SlugDecodeError,
    SlugError,
)
from uslug.util.time import now_parts, to_utc_datetime


def test_now_parts_splits_seconds_and_nanos(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(time, "time_ns", lambda: 1_700_000_000_123_456_789)
    assert now_parts() == (1_700_000_000, 123_456_789)


def test_now_parts_reads_clock_on_every_call(monkeypatch: pytest.MonkeyPatch) -> None:
    ticks = iter([1_000_000_000, 2_000_000_001])
    monkeypatch.setattr(time, "time_ns", lambda: next(ticks))
    assert now_parts() == (1, 0)
    assert now_parts() == (2, 1)


def test_now_parts_wraps_clock_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_clock() -> int:
        raise OSError("clock_gettime failed")

    monkeypatch.setattr(time, "time_ns", broken_clock)
    with pytest.raises(ClockUnavailableError, match="clock_gettime failed"):
        now_parts()


def test_to_utc_datetime_truncates_below_microseconds() -> None:
    value = 1_700_000_000_123_456_789
    assert to_utc_datetime(value, 1_000_000_000) == datetime(
        2023, 11, 14, 22, 13, 20, 123456, tzinfo=UTC
    )
    assert to_utc_datetime(0, 1) == datetime(1970, 1, 1, tzinfo=UTC)


def test_error_types_share_slug_error_base() -> None:
    for error_type in (
        InvalidParameterError,
        RandomSourceUnavailableError,
        ClockUnavailableError,
        SlugDecodeError,
        ConfigError,
    ):
        assert issubclass(error_type, SlugError)
    assert issubclass(InvalidParameterError, ValueError)


def test_invalid_parameter_error_renders_value_and_hint() -> None:
    exc = InvalidParameterError("bad length", value=7, hint="use 10")
    assert str(exc) == "bad length (got 7; use 10)"
    assert str(InvalidParameterError("plain")) == "plain"
