"""Step result payload for a single state-machine transition.

Responsibilities:
  - Capture previous/final state and whether the event was ignored.

Inputs/Outputs:
  - Inputs: produced by transitions.evaluate_event.
  - Outputs: immutable dataclass consumed by the app facade and CLI trace.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.models import CalculatorState
from ..events.models import InputEvent


@dataclass(frozen=True)
class StepResult:
    prev_state: CalculatorState
    event: InputEvent
    final_state: CalculatorState
    ignored: bool

    @property
    def changed(self) -> bool:
        return self.final_state != self.prev_state
