from __future__ import annotations

import time
from datetime import UTC, datetime

from uslug.util.errors import ClockUnavailableError

_NANOS_PER_SEC = 1_000_000_000


def now_parts() -> tuple[int, int]:
    """Return (seconds, nanosecond remainder) since the epoch from the realtime clock."""
    try:
        total_ns = time.time_ns()
    except OSError as exc:
        raise ClockUnavailableError(f"failed to read realtime clock: {exc}") from exc
    return divmod(total_ns, _NANOS_PER_SEC)


def to_utc_datetime(value: int, unit_per_sec: int) -> datetime:
    """Convert a count of 1/unit_per_sec units since the epoch to an aware UTC datetime."""
    secs, rem = divmod(value, unit_per_sec)
    micros = rem * 1_000_000 // unit_per_sec
    return datetime.fromtimestamp(secs, tz=UTC).replace(microsecond=micros)
