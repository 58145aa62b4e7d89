from __future__ import annotations

from dataclasses import dataclass

from uslug.slug.precision import DEFAULT_LENGTH


@dataclass(slots=True)
class SlugSettings:
    length: int = DEFAULT_LENGTH
    count: int = 1
