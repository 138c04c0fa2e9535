from __future__ import annotations

from typing import Iterable, Optional

from tapcalc.core.domain.enums import AngleMode, Variant
from tapcalc.core.domain.models import CalculatorState
from tapcalc.core.engine.result import StepResult
from tapcalc.core.engine.transitions import evaluate_event, initial_state_for
from tapcalc.core.events import models as events
from tapcalc.core.events.models import InputEvent
from .dto import Observation
from .keypad import parse_key
from .ports import DisplayRenderer


class CalculatorApplication:
    """Owns the single long-lived calculator state and dispatches events into it."""

    def __init__(
        self,
        variant: Variant,
        initial_angle_mode: Optional[AngleMode] = None,
        renderer: Optional[DisplayRenderer] = None,
    ) -> None:
        if variant == Variant.BASIC and initial_angle_mode is not None:
            raise ValueError("basic variant has no angle mode")
        self._variant = variant
        self._state = initial_state_for(variant, initial_angle_mode)
        self._renderer = renderer
        self._last_step: Optional[StepResult] = None

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def display(self) -> str:
        return self._state.display

    @property
    def angle_mode(self) -> Optional[AngleMode]:
        return self._state.angle_mode

    @property
    def last_step(self) -> Optional[StepResult]:
        return self._last_step

    def observe(self) -> Observation:
        return Observation.from_state(self._state)

    def dispatch(self, event: InputEvent) -> Observation:
        step = evaluate_event(self._state, event, self._variant)
        self._state = step.final_state
        self._last_step = step
        observation = self.observe()
        if self._renderer is not None:
            self._renderer.render(observation)
        return observation

    def press(self, label: str) -> Observation:
        return self.dispatch(parse_key(label, self._variant))

    def replay(self, inputs: Iterable[InputEvent]) -> list[Observation]:
        return [self.dispatch(event) for event in inputs]

    def reset(self) -> Observation:
        return self.dispatch(events.clear())
