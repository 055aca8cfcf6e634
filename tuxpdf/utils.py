"""Small helpers shared across the package."""

from __future__ import annotations

import secrets
import string

_ALPHANUMERIC = string.ascii_letters + string.digits


def random_character_string(length: int) -> str:
    """A string of ``length`` random ASCII letters and digits."""
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    return "".join(secrets.choice(_ALPHANUMERIC) for _ in range(length))