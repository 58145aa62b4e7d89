"""Application-level error types."""

from __future__ import annotations


class SlugError(Exception):
    """Base error for slug generation."""


class InvalidParameterError(SlugError, ValueError):
    """Raised when a requested parameter is outside its allowed set."""

    def __init__(self, message: str, *, value: object = None, hint: str | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.hint = hint

    def __str__(self) -> str:
        detail = super().__str__()
        if self.hint:
            return f"{detail} (got {self.value!r}; {self.hint})"
        return detail


class RandomSourceUnavailableError(SlugError):
    """Raised when the secure random source cannot provide a byte."""


class ClockUnavailableError(SlugError):
    """Raised when the realtime clock cannot be read."""


class SlugDecodeError(SlugError, ValueError):
    """Raised when a string is not a well-formed slug."""


class ConfigError(SlugError):
    """Raised when settings loading/validation fails."""
