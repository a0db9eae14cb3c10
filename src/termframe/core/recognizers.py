"""Per-type recognizer/parse pairs used by the ask-and-retry loop.

A :class:`Recognizer` answers two questions about a raw token: *can it
be read as this type?* and *what value does it denote?*.  The prompt
engine only calls :meth:`Recognizer.parse` after
:meth:`Recognizer.recognizes` returned ``True``.

Grammars
--------
* Integers: ``[+-]?[0-9]+``.  Fixed-width types additionally reject
  values outside their signed two's-complement range instead of
  wrapping.
* Decimals: optional sign, digits with optional fraction or a bare
  ``.fraction``, optional exponent.
* Floats: the decimal grammar plus the words ``NaN`` and ``Infinity``.

Python-only spellings accepted by :func:`int` / :func:`float` (digit
underscores, ``inf``, surrounding whitespace) are deliberately outside
these grammars.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Generic, TypeVar

from termframe.core.config import BooleanPatterns

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


@dataclass(frozen=True, slots=True)
class Recognizer(Generic[T]):
    """A named predicate plus the conversion it guards."""

    name: str
    accepts: Callable[[str], bool]
    convert: Callable[[str], T]

    def recognizes(self, token: str) -> bool:
        return self.accepts(token)

    def parse(self, token: str) -> T:
        return self.convert(token)


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

_MAX_FIXED_DIGITS = 19
"""Digits in 2**63; longer numerals can never fit a fixed-width type."""


def _is_integer(token: str) -> bool:
    return _INTEGER.fullmatch(token) is not None


def _to_int(token: str) -> int:
    """Convert an integer numeral of any length.

    ``int(str)`` is capped by ``sys.get_int_max_str_digits``; going
    through :class:`~decimal.Decimal` is not.
    """
    return int(Decimal(token))


def _bounded_integer(name: str, bits: int) -> Recognizer[int]:
    """Build a recognizer for a signed integer of *bits* width."""
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1

    def accepts(token: str) -> bool:
        if not _is_integer(token):
            return False
        if len(token.lstrip("+-").lstrip("0")) > _MAX_FIXED_DIGITS:
            return False
        return low <= _to_int(token) <= high

    return Recognizer(name, accepts, _to_int)


BYTE: Recognizer[int] = _bounded_integer("byte", 8)
SHORT: Recognizer[int] = _bounded_integer("short", 16)
INT32: Recognizer[int] = _bounded_integer("int", 32)
INT64: Recognizer[int] = _bounded_integer("long", 64)
BIG_INTEGER: Recognizer[int] = Recognizer("big integer", _is_integer, _to_int)


# ---------------------------------------------------------------------------
# Decimals and floating point
# ---------------------------------------------------------------------------

_FLOAT32_MAX_BITS = 0x7F7FFFFF
_FLOAT32_OVERFLOW = Fraction(2) ** 128
"""Where the binary32 value after the largest finite one would sit."""


def _float32_bits(value: float) -> int:
    return struct.unpack("<I", struct.pack("<f", value))[0]


def _float32_from_bits(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def _to_float32(token: str) -> float:
    """Parse *token* and round it to the nearest IEEE-754 binary32 value.

    The exact decimal value is compared with the midpoint of its two
    binary32 neighbours (ties to even).  Rounding the double returned by
    :func:`float` instead would round twice.  Values past the largest
    finite binary32 round to signed infinity.
    """
    approx = float(token)
    if math.isnan(approx) or math.isinf(approx) or approx == 0.0:
        return approx

    exact = abs(Fraction(Decimal(token)))
    try:
        bits = _float32_bits(abs(approx))
    except OverflowError:
        bits = _FLOAT32_MAX_BITS

    if Fraction(_float32_from_bits(bits)) > exact:
        lower, upper = bits - 1, bits
    else:
        lower, upper = bits, bits + 1

    overflow = upper > _FLOAT32_MAX_BITS
    lower_value = Fraction(_float32_from_bits(lower))
    upper_value = (
        _FLOAT32_OVERFLOW if overflow else Fraction(_float32_from_bits(upper))
    )
    midpoint = (lower_value + upper_value) / 2

    if exact < midpoint or (exact == midpoint and lower % 2 == 0):
        result = _float32_from_bits(lower)
    else:
        result = math.inf if overflow else _float32_from_bits(upper)
    return math.copysign(result, approx)


BIG_DECIMAL: Recognizer[Decimal] = Recognizer(
    "big decimal",
    lambda token: _DECIMAL.fullmatch(token) is not None,
    Decimal,
)
FLOAT32: Recognizer[float] = Recognizer(
    "float",
    lambda token: _FLOAT.fullmatch(token) is not None,
    _to_float32,
)
FLOAT64: Recognizer[float] = Recognizer(
    "double",
    lambda token: _FLOAT.fullmatch(token) is not None,
    float,
)


# ---------------------------------------------------------------------------
# Strings and booleans
# ---------------------------------------------------------------------------

STRING: Recognizer[str] = Recognizer("string", lambda token: True, str)


def boolean(patterns: BooleanPatterns) -> Recognizer[bool]:
    """Recognize tokens matching either matcher of *patterns*.

    The positive matcher is checked first, so a token matching both
    parses as ``True``.
    """

    def accepts(token: str) -> bool:
        return patterns.positive.matches(token) or patterns.negative.matches(token)

    return Recognizer("boolean", accepts, patterns.positive.matches)


__all__: list[str] = [
    "BIG_DECIMAL",
    "BIG_INTEGER",
    "BYTE",
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "Recognizer",
    "SHORT",
    "STRING",
    "boolean",
]
