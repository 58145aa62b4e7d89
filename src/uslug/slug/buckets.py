"""Digit-to-letter bucket table.

52 letters spread over ten buckets, one per decimal digit, following the
QWERTY rows with alternating capitalisation. No letter appears in more than
one bucket, so every letter identifies its digit.
"""

from __future__ import annotations

from types import MappingProxyType

DIGIT_BUCKETS: tuple[str, ...] = (
    "qWeRtY",  # 0
    "QwErTy",  # 1
    "uIoPa",  # 2
    "UiOpA",  # 3
    "sDfGh",  # 4
    "SdFgH",  # 5
    "jKlZx",  # 6
    "JkLzX",  # 7
    "cVbNm",  # 8
    "CvBnM",  # 9
)

LETTER_DIGITS = MappingProxyType(
    {letter: digit for digit, bucket in enumerate(DIGIT_BUCKETS) for letter in bucket}
)


def bucket_for(digit: int) -> str:
    return DIGIT_BUCKETS[digit]


def bucket_digit(letter: str) -> int | None:
    """Return the digit whose bucket holds ``letter``, or None."""
    return LETTER_DIGITS.get(letter)
