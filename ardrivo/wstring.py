"""Arduino-style mutable ``String`` with numeric conversions."""

from __future__ import annotations

import enum
import math
import re
import string
import struct

__all__ = ["Base", "String"]


class Base(enum.IntEnum):
    """Numeric bases for integer conversion."""

    BIN = 2
    DEC = 10
    HEX = 16


_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_INT64_MIN = -(1 << 63)
_FLT_MAX = 3.4028234663852886e38

_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_RE = re.compile(
    r"""[ \t\n\v\f\r]*
    (?P<num>[+-]?(?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
      | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?
      | inf(?:inity)?
      | nan
    ))""",
    re.VERBOSE | re.IGNORECASE,
)

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _negative_width(value: int, tagged: bool) -> int:
    """Bit width used for the two's complement form of a negative integer.

    A :class:`Base` member reinterprets the value at its natural width (32 bits
    when it fits, else 64); a plain integer base widens it to 64 bits.
    """
    if value < _INT64_MIN:
        raise OverflowError(f"{value} does not fit in 64 bits")
    if tagged and value >= _INT32_MIN:
        return 32
    return 64


def _format_int(value: int, base) -> str:
    if base is None:
        return str(value)
    if int(base) not in (2, 10, 16):
        raise ValueError("Unsupported base for numeric conversion")
    if int(base) == 10:
        return str(value)
    if value < 0:
        width = _negative_width(value, isinstance(base, Base))
        value &= (1 << width) - 1
    return format(value, "b" if int(base) == 2 else "X")


def _parse_double(text: str) -> float | None:
    match = _FLOAT_RE.match(text)
    if not match:
        return None
    literal = match["num"]
    lowered = literal.lower()
    try:
        value = float.fromhex(literal) if "x" in lowered else float(literal)
    except OverflowError:
        return None
    if math.isinf(value) and "inf" not in lowered:
        return None
    return value


def _text_of(value) -> str:
    if isinstance(value, String):
        return value._text
    if isinstance(value, str):
        return value
    raise TypeError(f"expected String or str, got {type(value).__name__}")


class String:
    """Mutable text with the Arduino ``String`` interface."""

    __slots__ = ("_text", "_capacity")

    def __init__(self, value="", base=None):
        self._capacity = 0
        if isinstance(value, String):
            self._text = value._text
        elif isinstance(value, str):
            if base is not None:
                raise TypeError("a base applies only to numeric values")
            self._text = value
        elif isinstance(value, float):
            # The second argument is a precision here and is ignored.
            self._text = f"{value:f}"
        elif isinstance(value, int):
            self._text = _format_int(int(value), base)
        else:
            raise TypeError(f"cannot build a String from {type(value).__name__}")

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"String({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    @property
    def capacity(self) -> int:
        """Reserved size: at least the current length."""
        return max(self._capacity, len(self._text))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._text):
            raise IndexError(f"index {index} out of range for length {len(self._text)}")

    def __getitem__(self, index: int) -> str:
        self._check_index(index)
        return self._text[index]

    def __setitem__(self, index: int, c: str) -> None:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        self._check_index(index)
        self._text = self._text[:index] + c + self._text[index + 1 :]

    def char_at(self, index: int) -> str:
        """Character at ``index``; raises IndexError when out of range."""
        return self[index]

    def concat(self, value) -> bool:
        """Append the text form of ``value``."""
        self._text += String(value)._text
        return True

    def compare_to(self, other) -> int:
        """Compare bytes over the shorter length only; returns -1, 0 or 1."""
        mine = self._text.encode()
        theirs = _text_of(other).encode()
        for a, b in zip(mine, theirs):
            if a != b:
                return -1 if a < b else 1
        return 0

    def starts_with(self, other) -> bool:
        return self._text.startswith(_text_of(other))

    def ends_with(self, other) -> bool:
        return self._text.endswith(_text_of(other))

    def get_bytes(self, length: int) -> bytes:
        """Up to ``length`` leading bytes of the text."""
        return self._text.encode()[: max(length, 0)]

    def index_of(self, sub, start: int = 0) -> int:
        """Position of ``sub`` at or after ``start``, or -1."""
        if start < 0:
            raise IndexError("start must not be negative")
        return self._text.find(_text_of(sub), start)

    def remove(self, index: int, count: int | None = None) -> None:
        """Erase from ``index``: to the end, or ``index + count - 1`` characters."""
        if count is not None and count < 0:
            raise ValueError("count must not be negative")
        if not 0 <= index <= len(self._text):
            raise IndexError(f"index {index} out of range for length {len(self._text)}")
        head = self._text[:index]
        if count is None:
            self._text = head
            return
        span = index + count - 1
        self._text = head if span < 0 else head + self._text[index + span :]

    def replace(self, old, new) -> None:
        """Cut the text at the first ``old`` and append ``new`` there."""
        old_text, new_text = _text_of(old), _text_of(new)
        if not old_text:
            raise ValueError("substring to replace must not be empty")
        position = self._text.find(old_text)
        if position >= 0:
            self._text = self._text[:position] + new_text

    def reserve(self, size: int) -> None:
        """Raise the reserved size to at least ``size``; never shrinks it."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._capacity = max(self._capacity, size)

    def set_char_at(self, index: int, c: str) -> None:
        self[index] = c

    def substring(self, start: int, end: int | None = None) -> String:
        """Text from ``start`` to ``end``; to the end when ``end`` is omitted or before ``start``."""
        if not 0 <= start <= len(self._text):
            raise IndexError(f"start {start} out of range for length {len(self._text)}")
        if end is None or end < start:
            return String(self._text[start:])
        return String(self._text[start:end])

    def to_char_array(self, length: int) -> bytes:
        """Up to ``length`` leading bytes, without a terminator."""
        return self.get_bytes(length)

    def to_int(self) -> int:
        """Leading decimal integer, or 0 if absent or outside 32 bits."""
        match = _INT_RE.match(self._text)
        if not match:
            return 0
        value = int(match[1])
        return value if _INT32_MIN <= value <= _INT32_MAX else 0

    def to_double(self) -> float:
        """Leading floating-point number, or 0.0 if absent or out of range."""
        value = _parse_double(self._text)
        return 0.0 if value is None else value

    def to_float(self) -> float:
        """Like :meth:`to_double`, rounded to single precision."""
        value = _parse_double(self._text)
        if value is None or (math.isfinite(value) and abs(value) > _FLT_MAX):
            return 0.0
        return struct.unpack("f", struct.pack("f", value))[0]

    def to_lower_case(self) -> None:
        self._text = self._text.translate(_ASCII_LOWER)

    def to_upper_case(self) -> None:
        self._text = self._text.translate(_ASCII_UPPER)

    def trim(self) -> None:
        """Strip surrounding spaces; a string of only spaces is left as is."""
        stripped = self._text.strip(" ")
        if stripped:
            self._text = stripped

    def equals(self, other) -> bool:
        return self._text == _text_of(other)

    def equals_ignore_case(self, other) -> bool:
        return self._text.translate(_ASCII_LOWER) == _text_of(other).translate(_ASCII_LOWER)

    def __eq__(self, other) -> bool:
        if isinstance(other, (String, str)):
            return self._text == _text_of(other)
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (String, str)):
            return self._text < _text_of(other)
        return NotImplemented

    def __le__(self, other) -> bool:
        if isinstance(other, (String, str)):
            return self._text <= _text_of(other)
        return NotImplemented

    def __gt__(self, other) -> bool:
        if isinstance(other, (String, str)):
            return self._text > _text_of(other)
        return NotImplemented

    def __ge__(self, other) -> bool:
        if isinstance(other, (String, str)):
            return self._text >= _text_of(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __add__(self, other) -> String:
        if isinstance(other, (String, str)):
            return String(self._text + _text_of(other))
        return NotImplemented

    def __radd__(self, other) -> String:
        if isinstance(other, str):
            return String(other + self._text)
        return NotImplemented

    def __iadd__(self, other) -> String:
        self.concat(other)
        return self