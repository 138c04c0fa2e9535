from __future__ import annotations

from enum import Enum


# Events are raw inputs only; renderers may emit them from any widget.
class EventKind(Enum):
    DIGIT = "DIGIT"
    DECIMAL_POINT = "DECIMAL_POINT"
    CLEAR = "CLEAR"
    OPERATOR = "OPERATOR"
    EQUALS = "EQUALS"
    TRIG_FUNCTION = "TRIG_FUNCTION"
    TOGGLE_ANGLE_MODE = "TOGGLE_ANGLE_MODE"


TRIG_ONLY_KINDS = frozenset({EventKind.TRIG_FUNCTION, EventKind.TOGGLE_ANGLE_MODE})
