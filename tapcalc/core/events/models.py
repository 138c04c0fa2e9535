from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tapcalc.core.domain.enums import BinaryOperator, TrigFunction
from .enums import EventKind


@dataclass(frozen=True)
class InputEvent:
    """Single tagged input event; payload fields are set only for their kind."""
    kind: EventKind
    digit: Optional[int] = None
    operator: Optional[BinaryOperator] = None
    function: Optional[TrigFunction] = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EventKind):
            raise ValueError(f"event kind must be an EventKind, got {self.kind!r}")

        if self.kind == EventKind.DIGIT:
            if not isinstance(self.digit, int) or isinstance(self.digit, bool):
                raise ValueError("digit event requires an int digit")
            if self.digit < 0 or self.digit > 9:
                raise ValueError(f"digit must be within 0..9, got {self.digit}")
        elif self.digit is not None:
            raise ValueError(f"{self.kind.value} event must not carry a digit")

        if self.kind == EventKind.OPERATOR:
            if not isinstance(self.operator, BinaryOperator):
                raise ValueError("operator event requires a BinaryOperator")
        elif self.operator is not None:
            raise ValueError(f"{self.kind.value} event must not carry an operator")

        if self.kind == EventKind.TRIG_FUNCTION:
            if not isinstance(self.function, TrigFunction):
                raise ValueError("trig event requires a TrigFunction")
        elif self.function is not None:
            raise ValueError(f"{self.kind.value} event must not carry a function")


def digit(value: int) -> InputEvent:
    return InputEvent(kind=EventKind.DIGIT, digit=value)


def decimal_point() -> InputEvent:
    return InputEvent(kind=EventKind.DECIMAL_POINT)


def clear() -> InputEvent:
    return InputEvent(kind=EventKind.CLEAR)


def operator(op: BinaryOperator) -> InputEvent:
    return InputEvent(kind=EventKind.OPERATOR, operator=op)


def equals() -> InputEvent:
    return InputEvent(kind=EventKind.EQUALS)


def trig(function: TrigFunction) -> InputEvent:
    return InputEvent(kind=EventKind.TRIG_FUNCTION, function=function)


def toggle_angle_mode() -> InputEvent:
    return InputEvent(kind=EventKind.TOGGLE_ANGLE_MODE)
