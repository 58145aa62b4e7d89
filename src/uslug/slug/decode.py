from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from uslug.slug.buckets import bucket_digit
from uslug.slug.encode import SEPARATOR
from uslug.slug.precision import Precision
from uslug.util.errors import SlugDecodeError
from uslug.util.time import to_utc_datetime


@dataclass(frozen=True, slots=True)
class DecodedSlug:
    slug: str
    digits: str
    precision: Precision
    value: int

    def timestamp(self) -> datetime:
        """UTC datetime of the encoded value; sub-microsecond digits are dropped."""
        return to_utc_datetime(self.value, self.precision.units_per_second)

    def to_dict(self) -> dict[str, object]:
        return {
            "slug": self.slug,
            "digits": self.digits,
            "length": int(self.precision),
            "unit": self.precision.unit,
            "value": self.value,
            "timestamp": self.timestamp().isoformat(),
        }


def decode_slug(slug: str) -> DecodedSlug:
    if not isinstance(slug, str):
        raise SlugDecodeError("slug must be str")
    try:
        precision = Precision(len(slug) - 1)
    except ValueError as exc:
        raise SlugDecodeError(f"slug must be 11, 14, 17 or 20 characters: {slug!r}") from exc

    half = int(precision) // 2
    if slug[half] != SEPARATOR or slug.count(SEPARATOR) != 1:
        raise SlugDecodeError(f"slug must contain a single '-' at index {half}: {slug!r}")

    digits: list[str] = []
    for ch in slug[:half] + slug[half + 1 :]:
        digit = bucket_digit(ch)
        if digit is None:
            raise SlugDecodeError(f"slug contains non-bucket character {ch!r}: {slug!r}")
        digits.append(str(digit))

    digit_str = "".join(digits)
    return DecodedSlug(slug=slug, digits=digit_str, precision=precision, value=int(digit_str))
