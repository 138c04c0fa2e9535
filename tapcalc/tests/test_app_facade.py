"""Tests for the calculator application facade."""

from __future__ import annotations

import pytest

from tapcalc.app_api.dto import Observation
from tapcalc.app_api.facade import CalculatorApplication
from tapcalc.core.domain.enums import AngleMode, BinaryOperator, TrigFunction, Variant
from tapcalc.core.domain.models import initial_state
from tapcalc.core.events import models as events


class _RecordingRenderer:
    def __init__(self) -> None:
        self.seen: list[Observation] = []

    def render(self, observation: Observation) -> None:
        self.seen.append(observation)


def test_basic_app_starts_at_zero_without_angle_mode() -> None:
    app = CalculatorApplication(Variant.BASIC)
    assert app.display == "0"
    assert app.angle_mode is None
    assert app.observe() == Observation(display="0", angle_mode=None)
    assert app.last_step is None


def test_basic_app_rejects_angle_mode() -> None:
    with pytest.raises(ValueError):
        CalculatorApplication(Variant.BASIC, initial_angle_mode=AngleMode.RADIANS)


def test_replay_returns_one_observation_per_event() -> None:
    app = CalculatorApplication(Variant.BASIC)
    observations = app.replay(
        [
            events.digit(6),
            events.operator(BinaryOperator.ADD),
            events.digit(4),
            events.operator(BinaryOperator.MULTIPLY),
            events.digit(2),
            events.equals(),
        ]
    )
    assert [o.display for o in observations] == ["6", "6", "4", "10", "2", "20"]
    assert app.display == "20"


def test_renderer_receives_every_observation() -> None:
    renderer = _RecordingRenderer()
    app = CalculatorApplication(Variant.SCIENTIFIC, renderer=renderer)
    app.press("1")
    app.press("8")
    app.press("0")
    app.press("sin")
    app.press("DEG")
    assert [o.display for o in renderer.seen] == ["1", "18", "180", "0", "0"]
    assert renderer.seen[-1].angle_mode == AngleMode.RADIANS
    assert renderer.seen[0].angle_mode == AngleMode.DEGREES


def test_reset_clears_arithmetic_but_keeps_mode() -> None:
    app = CalculatorApplication(Variant.SCIENTIFIC, initial_angle_mode=AngleMode.RADIANS)
    app.press("5")
    app.press("+")
    observation = app.reset()
    assert observation == Observation(display="0", angle_mode=AngleMode.RADIANS)
    assert app.state == initial_state(AngleMode.RADIANS)


def test_last_step_marks_ignored_trig_on_basic() -> None:
    app = CalculatorApplication(Variant.BASIC)
    app.press("9")
    observation = app.dispatch(events.trig(TrigFunction.COS))
    assert observation.display == "9"
    assert app.last_step is not None
    assert app.last_step.ignored is True


def test_press_rejects_unknown_label() -> None:
    app = CalculatorApplication(Variant.BASIC)
    with pytest.raises(ValueError):
        app.press("sin")
    with pytest.raises(ValueError):
        app.press("%")
    assert app.display == "0"


def test_observation_render_text() -> None:
    assert Observation(display="12").render_text() == "12"
    assert Observation(display="0", angle_mode=AngleMode.DEGREES).render_text() == "0 [DEG]"
