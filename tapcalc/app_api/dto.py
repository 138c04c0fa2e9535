"""DTO definitions for app-level data exchange.

Responsibilities:
  - Define stable, typed structures handed to renderers and callers.
Must not:
  - Implement calculator logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tapcalc.core.domain.enums import AngleMode
from tapcalc.core.domain.models import CalculatorState


@dataclass(frozen=True)
class Observation:
    display: str
    angle_mode: Optional[AngleMode] = None

    @classmethod
    def from_state(cls, state: CalculatorState) -> Observation:
        return cls(display=state.display, angle_mode=state.angle_mode)

    def render_text(self) -> str:
        if self.angle_mode is None:
            return self.display
        return f"{self.display} [{self.angle_mode.value}]"
