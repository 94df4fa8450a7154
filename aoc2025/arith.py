"""Small integer helpers shared by the puzzle solutions."""

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def modulo_sane(dividend: int, modulus: int) -> int:
    """Return ``dividend`` modulo ``modulus``, always in ``[0, modulus)``.

    A modulus of zero or less is treated as a caller bug and raises ``ValueError``.
    """
    if modulus <= 0:
        raise ValueError(
            f"modulus {modulus} <=0 is not sane, probably a bug at the call site"
        )
    return dividend % modulus


def parse_int(text: str) -> int:
    """Parse a strict decimal integer with an optional sign.

    Unlike ``int()``, surrounding whitespace and underscores are rejected.
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    return int(text)