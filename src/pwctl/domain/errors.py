"""Error types raised by the domain layer.

Services translate these into ``ServiceError`` payloads using ``code``.
"""

from __future__ import annotations

from pwctl.domain.alphabet import MIN_LENGTH


class PasswordError(Exception):
    """Base class for password domain failures."""

    code: str = "PASSWORD_ERROR"


class InvalidLengthError(PasswordError, ValueError):
    """Requested generation length is below the minimum."""

    code = "INVALID_LENGTH"

    def __init__(self, length: int) -> None:
        super().__init__(f"Password length must be at least {MIN_LENGTH} characters")
        self.length = length


class RandomSourceError(PasswordError, RuntimeError):
    """The secure random source could not supply a usable value."""

    code = "RANDOM_SOURCE_FAILURE"


class InvalidCountError(PasswordError, ValueError):
    """Requested batch size is below one."""

    code = "INVALID_COUNT"

    def __init__(self, count: int) -> None:
        super().__init__(f"Password count must be at least 1, got {count}")
        self.count = count
