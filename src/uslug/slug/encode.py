from __future__ import annotations

import secrets
from collections.abc import Callable

from uslug.slug.buckets import bucket_for
from uslug.slug.precision import Precision, select_precision
from uslug.util.errors import InvalidParameterError, RandomSourceUnavailableError
from uslug.util.time import now_parts

SEPARATOR = "-"

ByteSource = Callable[[], int]


def secure_byte() -> int:
    """Draw one byte from the OS CSPRNG."""
    try:
        return secrets.token_bytes(1)[0]
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailableError(f"secure random source failed: {exc}") from exc


def timestamp_value(precision: Precision, parts: tuple[int, int] | None = None) -> int:
    """Return the current time as a count of ``precision`` units since the epoch."""
    secs, nanos = parts if parts is not None else now_parts()
    return precision.count(secs, nanos)


def timestamp_digits(value: int, length: int) -> str:
    """
    Render value as exactly ``length`` decimal digits.

    Shorter values are zero-padded on the left. Longer values keep only the
    lowest-order ``length`` digits.
    """
    if value < 0:
        raise InvalidParameterError("timestamp value must be >= 0", value=value)
    return str(value % 10**length).zfill(length)


def encode_digit(digit: int, draw_byte: ByteSource = secure_byte) -> str:
    # Plain modulo: buckets of 5 and 6 letters are slightly biased towards low indexes.
    bucket = bucket_for(digit)
    return bucket[draw_byte() % len(bucket)]


def assemble_slug(digits: str, draw_byte: ByteSource = secure_byte) -> str:
    half = len(digits) // 2
    out: list[str] = []
    for idx, ch in enumerate(digits):
        if idx == half:
            out.append(SEPARATOR)
        out.append(encode_digit(int(ch), draw_byte))
    return "".join(out)


def slug_from_timestamp(
    value: int, length: int | None = None, *, draw_byte: ByteSource = secure_byte
) -> str:
    """Encode an explicit timestamp value at the given slug length."""
    precision = select_precision(length)
    return assemble_slug(timestamp_digits(value, precision), draw_byte)


def generate_slug(length: int | None = None) -> str:
    """
    Generate a slug from the current time.

    length selects the precision: 10 (seconds), 13 (milliseconds),
    16 (microseconds, default) or 19 (nanoseconds). The result has
    length + 1 characters with a hyphen at index length // 2.
    """
    precision = select_precision(length)
    value = timestamp_value(precision)
    return assemble_slug(timestamp_digits(value, precision))


def generate_slugs(count: int, length: int | None = None) -> list[str]:
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidParameterError("count must be int >= 1", value=count)
    precision = select_precision(length)
    return [generate_slug(precision) for _ in range(count)]
