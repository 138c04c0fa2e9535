"""Keypad label mapping for presentation layers.

Responsibilities:
  - Translate button labels into InputEvent values.
  - Expose per-variant keypad rows and accepted labels.
Must not:
  - Hold calculator state; labels map to events only.
"""

from __future__ import annotations

from tapcalc.core.domain.enums import (
    OPERATOR_METADATA,
    TrigFunction,
    Variant,
    operator_from_label,
)
from tapcalc.core.events import models as events
from tapcalc.core.events.models import InputEvent

DIGIT_LABELS = tuple(str(d) for d in range(10))
DECIMAL_LABELS = (".",)
CLEAR_LABELS = ("AC", "C")
EQUALS_LABELS = ("=",)
TOGGLE_LABELS = ("DEG", "RAD", "MODE")

BASIC_KEYPAD_ROWS: tuple[tuple[str, ...], ...] = (
    ("AC", "÷", "×"),
    ("7", "8", "9", "-"),
    ("4", "5", "6", "+"),
    ("1", "2", "3", "="),
    ("0", "."),
)

SCIENTIFIC_KEYPAD_ROWS: tuple[tuple[str, ...], ...] = (
    ("sin", "cos", "tan", "DEG"),
) + BASIC_KEYPAD_ROWS

_COMPACT_CHARS = frozenset(DIGIT_LABELS + DECIMAL_LABELS)


def keypad_rows(variant: Variant) -> tuple[tuple[str, ...], ...]:
    if variant == Variant.SCIENTIFIC:
        return SCIENTIFIC_KEYPAD_ROWS
    return BASIC_KEYPAD_ROWS


def labels_for(variant: Variant) -> frozenset[str]:
    labels: set[str] = set(DIGIT_LABELS + DECIMAL_LABELS + CLEAR_LABELS + EQUALS_LABELS)
    for meta in OPERATOR_METADATA.values():
        labels.update(meta["aliases"])
    if variant == Variant.SCIENTIFIC:
        labels.update(fn.value for fn in TrigFunction)
        labels.update(TOGGLE_LABELS)
    return frozenset(labels)


def parse_key(label: str, variant: Variant) -> InputEvent:
    key = label.strip()
    if key not in labels_for(variant):
        raise ValueError(f"Unknown key '{label}' for {variant.value} keypad")

    if key in DIGIT_LABELS:
        return events.digit(int(key))
    if key in DECIMAL_LABELS:
        return events.decimal_point()
    if key in CLEAR_LABELS:
        return events.clear()
    if key in EQUALS_LABELS:
        return events.equals()
    if key in TOGGLE_LABELS:
        return events.toggle_angle_mode()

    op = operator_from_label(key)
    if op is not None:
        return events.operator(op)
    return events.trig(TrigFunction(key))


def split_keys(text: str) -> list[str]:
    """Split a whitespace-separated key string into single key labels.

    Tokens made only of digits and '.' are expanded per character, so
    "12.5 + 3 =" presses 1, 2, ., 5, +, 3, =.
    """
    labels: list[str] = []
    for token in text.split():
        if set(token) <= _COMPACT_CHARS:
            labels.extend(token)
        else:
            labels.append(token)
    return labels
