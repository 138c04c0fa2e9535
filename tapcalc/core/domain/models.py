"""Domain models for calculator state.

Responsibilities:
  - Define the immutable state value threaded through the transition function.

Invariants:
  - display is never empty and holds at most one '.'.
  - pending_operand and pending_operator are set and cleared together.
  - angle_mode is None exactly when the variant has no trig capability.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import AngleMode, BinaryOperator

INITIAL_DISPLAY = "0"


@dataclass(frozen=True)
class CalculatorState:
    display: str = INITIAL_DISPLAY
    pending_operand: Optional[str] = None
    pending_operator: Optional[BinaryOperator] = None
    awaiting_fresh_operand: bool = False
    operator_just_pressed: bool = False
    angle_mode: Optional[AngleMode] = None


def initial_state(angle_mode: Optional[AngleMode] = None) -> CalculatorState:
    return CalculatorState(angle_mode=angle_mode)
