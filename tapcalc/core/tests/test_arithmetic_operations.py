"""Tests for the binary operator table and trig evaluation."""

from __future__ import annotations

import math

from tapcalc.core.arithmetic.operations import (
    NOISE_TOLERANCE,
    apply_binary,
    evaluate_trig,
    snap_noise,
    to_radians,
)
from tapcalc.core.domain.enums import AngleMode, BinaryOperator, TrigFunction


def test_binary_operator_table() -> None:
    assert apply_binary(BinaryOperator.ADD, 6.0, 4.0) == 10.0
    assert apply_binary(BinaryOperator.SUBTRACT, 6.0, 4.0) == 2.0
    assert apply_binary(BinaryOperator.MULTIPLY, 6.0, 4.0) == 24.0
    assert apply_binary(BinaryOperator.DIVIDE, 6.0, 4.0) == 1.5


def test_divide_by_zero_yields_zero() -> None:
    assert apply_binary(BinaryOperator.DIVIDE, 7.0, 0.0) == 0.0
    assert apply_binary(BinaryOperator.DIVIDE, -7.0, -0.0) == 0.0
    assert apply_binary(BinaryOperator.DIVIDE, 0.0, 0.0) == 0.0


def test_to_radians_only_converts_in_degrees_mode() -> None:
    assert to_radians(180.0, AngleMode.DEGREES) == math.pi
    assert to_radians(2.0, AngleMode.RADIANS) == 2.0


def test_evaluate_trig_raw_keeps_noise() -> None:
    raw = evaluate_trig(TrigFunction.SIN, 180.0, AngleMode.DEGREES)
    assert raw != 0.0
    assert abs(raw) < NOISE_TOLERANCE


def test_evaluate_trig_infinite_input_is_nan() -> None:
    assert math.isnan(evaluate_trig(TrigFunction.SIN, math.inf, AngleMode.RADIANS))
    assert math.isnan(evaluate_trig(TrigFunction.COS, -math.inf, AngleMode.DEGREES))


def test_snap_noise_threshold() -> None:
    assert snap_noise(1.2246467991473532e-16) == 0.0
    assert snap_noise(-5e-11) == 0.0
    assert snap_noise(1e-9) == 1e-9
    assert snap_noise(0.5) == 0.5
    assert math.isnan(snap_noise(math.nan))
