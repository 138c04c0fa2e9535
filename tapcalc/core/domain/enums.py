"""Domain enums for the calculator state machine.

Responsibilities:
  - Define operator, function, angle-mode and variant identifiers.
  - Provide display labels keyed by operator for renderers and audits.

Invariants:
  - Enum values must remain stable; profiles and keypad labels refer to them.
  - OPERATOR_METADATA must cover every BinaryOperator.
"""

from __future__ import annotations

from enum import Enum


class BinaryOperator(Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"


class TrigFunction(Enum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"


class AngleMode(Enum):
    DEGREES = "DEG"
    RADIANS = "RAD"

    def toggled(self) -> AngleMode:
        if self is AngleMode.DEGREES:
            return AngleMode.RADIANS
        return AngleMode.DEGREES


class Variant(Enum):
    BASIC = "basic"
    SCIENTIFIC = "scientific"


# Keypad symbol first; remaining entries are accepted aliases.
OPERATOR_METADATA: dict[BinaryOperator, dict[str, object]] = {
    BinaryOperator.ADD: {
        "symbol": "+",
        "aliases": ("+",),
    },
    BinaryOperator.SUBTRACT: {
        "symbol": "-",
        "aliases": ("-", "−"),
    },
    BinaryOperator.MULTIPLY: {
        "symbol": "×",
        "aliases": ("×", "*", "x"),
    },
    BinaryOperator.DIVIDE: {
        "symbol": "÷",
        "aliases": ("÷", "/"),
    },
}


def operator_symbol(op: BinaryOperator) -> str:
    return str(OPERATOR_METADATA[op]["symbol"])


def operator_from_label(label: str) -> BinaryOperator | None:
    if not label:
        return None
    for op, meta in OPERATOR_METADATA.items():
        if label in meta["aliases"]:
            return op
    return None


_missing = [op for op in BinaryOperator if op not in OPERATOR_METADATA]
if _missing:
    raise RuntimeError(f"Missing OPERATOR_METADATA for: {[m.value for m in _missing]}")
