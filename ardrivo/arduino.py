"""Core Arduino helpers: pin constants, math, character classes, random numbers and bits."""

from __future__ import annotations

import enum
import random as _random
import string

__all__ = [
    "Level",
    "PinMode",
    "map_value",
    "sq",
    "is_alpha",
    "is_alpha_numeric",
    "is_ascii",
    "is_control",
    "is_digit",
    "is_graph",
    "is_hexadecimal_digit",
    "is_lower_case",
    "is_printable",
    "is_punct",
    "is_space",
    "is_upper_case",
    "is_whitespace",
    "random_range",
    "random_seed",
    "bit",
    "bit_clear",
    "bit_read",
    "bit_set",
    "bit_write",
    "high_byte",
    "low_byte",
]


class Level(enum.IntEnum):
    """Digital pin levels."""

    LOW = 0
    HIGH = 1


class PinMode(enum.IntEnum):
    """Pin directions; INPUT_PULLUP behaves as a plain input."""

    INPUT = 0
    OUTPUT = 1
    INPUT_PULLUP = 0


def map_value(x: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map ``x`` from one integer range onto another, truncating toward zero."""
    span = in_max - in_min
    if span == 0:
        raise ZeroDivisionError("input range is empty")
    numerator = (x - in_min) * (out_max - out_min)
    quotient = abs(numerator) // abs(span)
    if (numerator < 0) != (span < 0):
        quotient = -quotient
    return quotient + out_min


def sq(x):
    """Return ``x`` squared."""
    return x * x


_C_SPACE = " \t\n\v\f\r"


def _char(c: str) -> str:
    if not isinstance(c, str):
        raise TypeError(f"expected a single character, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def is_alpha(c: str) -> bool:
    """True for ASCII letters."""
    return _char(c) in string.ascii_letters


def is_alpha_numeric(c: str) -> bool:
    """True for ASCII letters and digits."""
    c = _char(c)
    return c in string.ascii_letters or c in string.digits


def is_ascii(c: str) -> bool:
    """True for 7-bit characters."""
    return ord(_char(c)) < 0x80


def is_control(c: str) -> bool:
    """True for ASCII control characters."""
    code = ord(_char(c))
    return code < 0x20 or code == 0x7F


def is_digit(c: str) -> bool:
    """True for decimal digits."""
    return _char(c) in string.digits


def is_graph(c: str) -> bool:
    """True for printable characters other than space."""
    return 0x21 <= ord(_char(c)) <= 0x7E


def is_hexadecimal_digit(c: str) -> bool:
    """True for hexadecimal digits."""
    return _char(c) in string.hexdigits


def is_lower_case(c: str) -> bool:
    """True for ASCII lower-case letters."""
    return _char(c) in string.ascii_lowercase


def is_printable(c: str) -> bool:
    """True for printable characters, space included."""
    return 0x20 <= ord(_char(c)) <= 0x7E


def is_punct(c: str) -> bool:
    """True for ASCII punctuation."""
    return _char(c) in string.punctuation


def is_space(c: str) -> bool:
    """True for the C white-space characters."""
    return _char(c) in _C_SPACE


def is_upper_case(c: str) -> bool:
    """True for ASCII upper-case letters."""
    return _char(c) in string.ascii_uppercase


def is_whitespace(c: str) -> bool:
    """True only for space and horizontal tab."""
    return _char(c) in " \t"


_rng = _random.Random()


def random_range(low: int, high: int | None = None) -> int:
    """Return a pseudo-random integer in ``[low, high)``, or ``[0, low)`` if ``high`` is omitted."""
    if high is None:
        low, high = 0, low
    if high <= low:
        raise ValueError(f"empty random range [{low}, {high})")
    return _rng.randrange(low, high)


def random_seed(seed: int) -> None:
    """Seed the generator behind :func:`random_range`."""
    _rng.seed(seed)


def bit(n: int) -> int:
    """Value with only bit ``n`` set."""
    return 1 << n


def bit_clear(x: int, n: int) -> int:
    """``x`` with bit ``n`` cleared."""
    return x & ~bit(n)


def bit_read(x: int, n: int) -> int:
    """Bit ``n`` of ``x``."""
    return (x >> n) & 1


def bit_set(x: int, n: int) -> int:
    """``x`` with bit ``n`` set."""
    return x | bit(n)


def bit_write(x: int, n: int, b) -> int:
    """``x`` with bit ``n`` set to the truth value of ``b``."""
    v = 1 if b else 0
    return x ^ ((-v ^ x) & bit(n))


def high_byte(x: int) -> int:
    """Second-lowest byte of ``x``."""
    return low_byte(x >> 8)


def low_byte(x: int) -> int:
    """Lowest byte of ``x``."""
    return x & 0xFF