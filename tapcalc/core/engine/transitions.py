"""State machine transitions for calculator input events.

Responsibilities:
  - Map (state, event) to the next state for every event kind.
  - Resolve chained binary operations left to right, without precedence.
  - Gate trig-only events on the variant capability.

Inputs/Outputs:
  - Inputs: CalculatorState, InputEvent, and the Variant selected at construction.
  - Outputs: StepResult with the final state; apply_event returns the state only.

Invariants:
  - Total over states and events: never raises, every display parses.
  - Deterministic; the only side effect is the optional debug callback.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from ..arithmetic.numbers import format_number, parse_number
from ..arithmetic.operations import apply_binary, evaluate_trig, snap_noise
from ..domain.enums import AngleMode, BinaryOperator, Variant
from ..domain.models import INITIAL_DISPLAY, CalculatorState, initial_state
from ..events.enums import TRIG_ONLY_KINDS, EventKind
from ..events.models import InputEvent
from .result import StepResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_machine_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def _debug(msg: str) -> None:
    if _DEBUG_FN is not None:
        _DEBUG_FN(msg)


Handler = Callable[[CalculatorState, InputEvent], CalculatorState]


def initial_state_for(variant: Variant, angle_mode: AngleMode | None = None) -> CalculatorState:
    if variant == Variant.SCIENTIFIC:
        return initial_state(angle_mode or AngleMode.DEGREES)
    return initial_state(None)


def _resolve_pending(state: CalculatorState) -> str:
    left = parse_number(state.pending_operand)
    right = parse_number(state.display)
    if state.pending_operator == BinaryOperator.DIVIDE and right == 0:
        _debug(f"DIVIDE_BY_ZERO left={state.pending_operand} right={state.display} result=0")
    return format_number(apply_binary(state.pending_operator, left, right))


def _on_digit(state: CalculatorState, event: InputEvent) -> CalculatorState:
    text = str(event.digit)
    if state.awaiting_fresh_operand or state.display == INITIAL_DISPLAY:
        display = text
    else:
        display = state.display + text
    return replace(
        state,
        display=display,
        awaiting_fresh_operand=False,
        operator_just_pressed=False,
    )


def _on_decimal_point(state: CalculatorState, event: InputEvent) -> CalculatorState:
    if state.awaiting_fresh_operand:
        return replace(
            state,
            display="0.",
            awaiting_fresh_operand=False,
            operator_just_pressed=False,
        )
    if "." in state.display:
        return state
    return replace(state, display=state.display + ".")


def _on_clear(state: CalculatorState, event: InputEvent) -> CalculatorState:
    # Angle mode survives a clear.
    return initial_state(state.angle_mode)


def _on_operator(state: CalculatorState, event: InputEvent) -> CalculatorState:
    if state.operator_just_pressed:
        # Repeated operator press: the latest one wins, nothing is evaluated.
        return replace(state, pending_operator=event.operator)

    display = state.display
    pending_operand = state.pending_operand
    if pending_operand is None:
        pending_operand = state.display
    elif state.pending_operator is not None:
        display = _resolve_pending(state)
        pending_operand = display

    return replace(
        state,
        display=display,
        pending_operand=pending_operand,
        pending_operator=event.operator,
        awaiting_fresh_operand=True,
        operator_just_pressed=True,
    )


def _on_equals(state: CalculatorState, event: InputEvent) -> CalculatorState:
    if state.pending_operator is None or state.pending_operand is None:
        return state
    return replace(
        state,
        display=_resolve_pending(state),
        pending_operand=None,
        pending_operator=None,
        awaiting_fresh_operand=True,
        operator_just_pressed=False,
    )


def _on_trig_function(state: CalculatorState, event: InputEvent) -> CalculatorState:
    mode = state.angle_mode or AngleMode.DEGREES
    raw = evaluate_trig(event.function, parse_number(state.display), mode)
    value = snap_noise(raw)
    if value == 0 and raw != 0:
        _debug(
            "TRIG_NOISE_SNAP "
            f"function={event.function.value} input={state.display} mode={mode.value} raw={raw!r}"
        )
    return replace(
        state,
        display=format_number(value),
        awaiting_fresh_operand=True,
        operator_just_pressed=False,
    )


def _on_toggle_angle_mode(state: CalculatorState, event: InputEvent) -> CalculatorState:
    mode = state.angle_mode or AngleMode.DEGREES
    return replace(state, angle_mode=mode.toggled())


_HANDLERS: dict[EventKind, Handler] = {
    EventKind.DIGIT: _on_digit,
    EventKind.DECIMAL_POINT: _on_decimal_point,
    EventKind.CLEAR: _on_clear,
    EventKind.OPERATOR: _on_operator,
    EventKind.EQUALS: _on_equals,
    EventKind.TRIG_FUNCTION: _on_trig_function,
    EventKind.TOGGLE_ANGLE_MODE: _on_toggle_angle_mode,
}


def evaluate_event(
    state: CalculatorState,
    event: InputEvent,
    variant: Variant = Variant.BASIC,
) -> StepResult:
    if event.kind in TRIG_ONLY_KINDS and variant != Variant.SCIENTIFIC:
        _debug(f"CAPABILITY_IGNORED kind={event.kind.value} variant={variant.value}")
        return StepResult(prev_state=state, event=event, final_state=state, ignored=True)

    final_state = _HANDLERS[event.kind](state, event)
    return StepResult(prev_state=state, event=event, final_state=final_state, ignored=False)


def apply_event(
    state: CalculatorState,
    event: InputEvent,
    variant: Variant = Variant.BASIC,
) -> CalculatorState:
    return evaluate_event(state, event, variant).final_state


_missing = [kind for kind in EventKind if kind not in _HANDLERS]
if _missing:
    raise RuntimeError(f"Missing transition handlers for: {[m.value for m in _missing]}")
