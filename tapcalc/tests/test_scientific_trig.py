"""Tests for trig functions and angle mode on the scientific variant."""

from __future__ import annotations

import pytest

from tapcalc.app_api.factories import default_app_factory
from tapcalc.app_api.keypad import split_keys
from tapcalc.core.domain.enums import AngleMode, BinaryOperator


def press_all(keys: str):
    app = default_app_factory.create("scientific")
    for label in split_keys(keys):
        app.press(label)
    return app


@pytest.mark.parametrize(
    "keys, expected",
    [
        ("180 sin", "0"),
        ("360 sin", "0"),
        ("90 cos", "0"),
        ("270 cos", "0"),
        ("180 tan", "0"),
        ("90 sin", "1"),
        ("0 cos", "1"),
        ("0 sin", "0"),
        ("180 cos", "-1"),
    ],
)
def test_degree_mode_snaps_noise(keys: str, expected: str) -> None:
    assert press_all(keys).display == expected


def test_radian_mode_uses_display_as_radians() -> None:
    app = press_all("DEG 3.141592653589793 sin")
    assert app.angle_mode == AngleMode.RADIANS
    assert app.display == "0"
    assert press_all("RAD 0 cos").display == "1"


def test_trig_result_awaits_fresh_operand() -> None:
    app = press_all("90 sin")
    assert app.state.awaiting_fresh_operand is True
    app.press("5")
    assert app.display == "5"


def test_trig_mid_chain_becomes_right_operand() -> None:
    app = press_all("2 + 90 sin")
    assert app.display == "1"
    assert app.state.pending_operand == "2"
    assert app.state.pending_operator == BinaryOperator.ADD
    app.press("=")
    assert app.display == "3"


def test_operator_after_trig_resolves_chain() -> None:
    app = press_all("1 + 0 cos +")
    assert app.display == "2"
    assert app.state.pending_operand == "2"


def test_trig_of_result_chains_further() -> None:
    assert press_all("45 + 45 = sin").display == "1"


def test_toggle_reports_mode_without_touching_display() -> None:
    app = press_all("1 2 ×")
    before = app.state
    observation = app.press("DEG")
    assert observation.angle_mode == AngleMode.RADIANS
    assert observation.display == "12"
    assert app.state.pending_operand == before.pending_operand
    assert app.state.pending_operator == before.pending_operator
