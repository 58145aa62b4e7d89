from __future__ import annotations

from enum import IntEnum

from uslug.util.errors import InvalidParameterError

DEFAULT_LENGTH = 16
PRECISION_HINT = "10=seconds, 13=milliseconds, 16=microseconds, 19=nanoseconds"


class Precision(IntEnum):
    """Supported timestamp precisions; the value is the slug digit length."""

    SECONDS = 10
    MILLISECONDS = 13
    MICROSECONDS = 16
    NANOSECONDS = 19

    @property
    def unit(self) -> str:
        return self.name.lower()

    @property
    def units_per_second(self) -> int:
        return _UNITS_PER_SECOND[self]

    def count(self, secs: int, nanos: int) -> int:
        """Express (seconds, nanosecond remainder) as a count of this unit."""
        units = self.units_per_second
        return secs * units + nanos // (1_000_000_000 // units)


_UNITS_PER_SECOND: dict[Precision, int] = {
    Precision.SECONDS: 1,
    Precision.MILLISECONDS: 1_000,
    Precision.MICROSECONDS: 1_000_000,
    Precision.NANOSECONDS: 1_000_000_000,
}


def select_precision(length: int | None) -> Precision:
    """Validate a requested slug length and return its precision.

    ``None`` selects the default of 16 digits (microseconds).
    """
    if length is None:
        return Precision(DEFAULT_LENGTH)
    if isinstance(length, int) and not isinstance(length, bool):
        try:
            return Precision(length)
        except ValueError:
            pass
    raise InvalidParameterError(
        "slug_length must be 10, 13, 16, or 19",
        value=length,
        hint=PRECISION_HINT,
    )
