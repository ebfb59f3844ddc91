"""Random password generation."""

from __future__ import annotations

import random
import string
from typing import Optional

PASSWORD_LEN = 17

# Each letter and digit range stops one short of its last character.
ALPHABET = (
    string.ascii_lowercase[:-1]
    + string.ascii_uppercase[:-1]
    + string.digits[:-1]
    + "_][.-+=:;/?<>\\*&^%$#@!`~,"
)


def generate_password(rng: Optional[random.Random] = None) -> str:
    """A random password of ``PASSWORD_LEN`` characters drawn from ``ALPHABET``."""
    rng = rng if rng is not None else random.SystemRandom()
    return "".join(rng.choice(ALPHABET) for _ in range(PASSWORD_LEN))