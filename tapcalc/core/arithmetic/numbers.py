"""Number parsing and display formatting.

Responsibilities:
  - Convert display text to float and float results back to display text.

Invariants:
  - format_number is the only float-to-text routine; arithmetic and trig share it.
  - parse_number(format_number(x)) == x for every non-NaN float x.
  - Digits are the shortest that round-trip; layout switches to exponent form
    outside decimal exponents [-6, 21), as the keypad display has always shown.
"""

from __future__ import annotations

import math
from decimal import Decimal

MAX_POSITIONAL_EXPONENT = 21
MIN_POSITIONAL_EXPONENT = -6


def parse_number(text: str) -> float:
    return float(text)


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # Covers -0.0 as well.
        return "0"
    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    return sign + _layout(digits, point)


def _shortest_digits(magnitude: float) -> tuple[str, int]:
    """Return (significant digits, decimal point position) for a positive float.

    The value equals 0.<digits> * 10**point. repr() already yields the shortest
    round-tripping text. Trailing zeros are stripped from the exact digit tuple
    so the ambient decimal context never rounds the result.
    """
    _, digit_tuple, exponent = Decimal(repr(magnitude)).as_tuple()
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    exponent = int(exponent) + len(raw) - len(digits)
    return digits, len(digits) + exponent


def _layout(digits: str, point: int) -> str:
    count = len(digits)
    if count <= point <= MAX_POSITIONAL_EXPONENT:
        return digits + "0" * (point - count)
    if 0 < point <= MAX_POSITIONAL_EXPONENT:
        return f"{digits[:point]}.{digits[point:]}"
    if MIN_POSITIONAL_EXPONENT < point <= 0:
        return "0." + "0" * (-point) + digits

    exponent = point - 1
    exp_sign = "+" if exponent >= 0 else "-"
    mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{exp_sign}{abs(exponent)}"
