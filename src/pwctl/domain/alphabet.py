"""Character sets shared by the generator and the validator.

INVARIANT: Both sets are immutable module constants. The generator draws
from ``ALPHABET`` in its fixed order; the validator only tests membership
in ``SPECIAL_CHARACTERS``.
"""

from __future__ import annotations

import string

SPECIAL_CHARS = "!@#$%^&*()"

ALPHABET: str = string.ascii_lowercase + string.ascii_uppercase + string.digits + SPECIAL_CHARS

SPECIAL_CHARACTERS: frozenset[str] = frozenset(SPECIAL_CHARS)

MIN_LENGTH = 8
