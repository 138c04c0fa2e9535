"""Replay keypad presses through the calculator engine.

Purpose:
  - Drive a calculator application from a scripted key sequence and print what
    a display would show.
Inputs:
  - Whitespace-separated keypad labels; digit runs like "12.5" expand per key.
Outputs:
  - Final display (with angle mode on the scientific variant) on stdout;
    one line per key with --trace.
Example:
  - PYTHONPATH=. python3 tapcalc/cli/run_keys.py --keys "6 + 4 × 2 ="
  - PYTHONPATH=. python3 tapcalc/cli/run_keys.py --profile scientific --keys "180 sin"
"""

from __future__ import annotations

import argparse

from tapcalc.app_api.config import load_config
from tapcalc.app_api.facade import CalculatorApplication
from tapcalc.app_api.factories import build_calculator_app, default_app_factory
from tapcalc.app_api.keypad import keypad_rows, parse_key, split_keys
from tapcalc.core.engine.transitions import set_machine_debug
from tapcalc.core.events.models import InputEvent
from ._debug_utils import _dbg


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay keypad presses through the calculator engine")
    parser.add_argument(
        "--keys",
        required=True,
        help='Keypad labels separated by spaces, e.g. "12 + 3 =" or "AC 45 sin"',
    )
    parser.add_argument(
        "--profile",
        choices=default_app_factory.names(),
        default="basic",
        help="Built-in calculator profile",
    )
    parser.add_argument("--config", help="Path to a JSON calculator config (overrides --profile)")
    parser.add_argument("--trace", action="store_true", help="Print the display after every key")
    parser.add_argument("--show-keypad", action="store_true", help="Print the keypad layout first")
    parser.add_argument("--debug", action="store_true", help="Enable engine debug output")
    return parser.parse_args()


def _build_app(args: argparse.Namespace) -> CalculatorApplication:
    if args.config:
        config = load_config(args.config)
        _dbg(args, f"config={args.config} variant={config.variant.value}")
        return build_calculator_app(config)
    _dbg(args, f"profile={args.profile}")
    return default_app_factory.create(args.profile)


def _parse_inputs(app: CalculatorApplication, keys: str) -> list[tuple[str, InputEvent]]:
    labels = split_keys(keys)
    if not labels:
        raise ValueError("--keys must contain at least one key")
    return [(label, parse_key(label, app.variant)) for label in labels]


def main() -> None:
    args = parse_args()

    try:
        app = _build_app(args)
        inputs = _parse_inputs(app, args.keys)
    except ValueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc

    if args.show_keypad:
        for row in keypad_rows(app.variant):
            print(" ".join(f"{label:>4}" for label in row))

    set_machine_debug((lambda msg: _dbg(args, msg)) if args.debug else None)
    try:
        for label, event in inputs:
            observation = app.dispatch(event)
            if args.trace:
                step = app.last_step
                suffix = " (ignored)" if step is not None and step.ignored else ""
                print(f"{label:>4} -> {observation.render_text()}{suffix}")
    finally:
        set_machine_debug(None)

    print(app.observe().render_text())


if __name__ == "__main__":
    main()
