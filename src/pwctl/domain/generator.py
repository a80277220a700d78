"""Cryptographically secure password generation.

Every character is an independent, uniform draw over ``ALPHABET``.
The default source is :func:`secrets.randbelow`, which samples by
reject-and-retry over ``getrandbits`` and therefore has no modulo bias.

INVARIANT: Generation is all-or-nothing. A failing source never yields
a shorter or partially random password.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable

from pwctl.domain.alphabet import ALPHABET, MIN_LENGTH
from pwctl.domain.errors import InvalidCountError, InvalidLengthError, RandomSourceError

logger = logging.getLogger(__name__)

RandBelow = Callable[[int], int]
"""Callable returning a uniform integer in ``[0, n)``."""


def _draw_index(randbelow: RandBelow, size: int) -> int:
    try:
        index = randbelow(size)
    except (OSError, NotImplementedError) as exc:
        msg = f"Failed to generate random character: {exc}"
        raise RandomSourceError(msg) from exc
    if not isinstance(index, int) or not 0 <= index < size:
        msg = f"Failed to generate random character: index {index!r} outside [0, {size})"
        raise RandomSourceError(msg)
    return index


def generate_password(length: int, *, randbelow: RandBelow = secrets.randbelow) -> str:
    """Return a random password of exactly *length* characters.

    Args:
        length: Number of characters; must be at least ``MIN_LENGTH``.
        randbelow: Secure integer source. Tests inject a seeded
            ``random.Random().randrange`` here.

    Raises:
        InvalidLengthError: *length* is below ``MIN_LENGTH``.
        RandomSourceError: The source errored or returned an out-of-range index.
    """
    if length < MIN_LENGTH:
        raise InvalidLengthError(length)

    size = len(ALPHABET)
    chars = [ALPHABET[_draw_index(randbelow, size)] for _ in range(length)]
    logger.debug("Generated password of length %d", length)
    return "".join(chars)


def generate_many(
    length: int,
    count: int,
    *,
    randbelow: RandBelow = secrets.randbelow,
) -> list[str]:
    """Return *count* independent passwords of *length* characters.

    The batch fails as a whole if any single draw fails.
    """
    if count < 1:
        raise InvalidCountError(count)
    if length < MIN_LENGTH:
        raise InvalidLengthError(length)
    return [generate_password(length, randbelow=randbelow) for _ in range(count)]
