"""Binary operator table and trigonometric evaluation.

Responsibilities:
  - Evaluate the four binary operators over floats.
  - Evaluate sin/cos/tan honoring the angle mode, and suppress near-zero noise.
Must not:
  - Raise for any float input; division by zero yields 0 and non-finite trig
    input yields NaN.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from tapcalc.core.domain.enums import AngleMode, BinaryOperator, TrigFunction

NOISE_TOLERANCE = 1e-10
DEGREES_TO_RADIANS = math.pi / 180


def _divide_or_zero(left: float, right: float) -> float:
    if right == 0:
        return 0.0
    return left / right


_BINARY_OPS: dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUBTRACT: operator.sub,
    BinaryOperator.MULTIPLY: operator.mul,
    BinaryOperator.DIVIDE: _divide_or_zero,
}

_TRIG_FUNCS: dict[TrigFunction, Callable[[float], float]] = {
    TrigFunction.SIN: math.sin,
    TrigFunction.COS: math.cos,
    TrigFunction.TAN: math.tan,
}


def apply_binary(op: BinaryOperator, left: float, right: float) -> float:
    return float(_BINARY_OPS[op](left, right))


def to_radians(value: float, mode: AngleMode) -> float:
    if mode == AngleMode.DEGREES:
        return value * DEGREES_TO_RADIANS
    return value


def evaluate_trig(function: TrigFunction, value: float, mode: AngleMode) -> float:
    radians = to_radians(value, mode)
    # math.sin(inf) raises; the display shows NaN instead.
    if math.isinf(radians):
        return math.nan
    return _TRIG_FUNCS[function](radians)


def snap_noise(value: float, tolerance: float = NOISE_TOLERANCE) -> float:
    if abs(value) < tolerance:
        return 0.0
    return value


_missing = [op for op in BinaryOperator if op not in _BINARY_OPS]
_missing += [fn for fn in TrigFunction if fn not in _TRIG_FUNCS]
if _missing:
    raise RuntimeError(f"Missing arithmetic handlers for: {[m.value for m in _missing]}")
