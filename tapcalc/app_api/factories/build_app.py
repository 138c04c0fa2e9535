"""Construct a fully wired calculator application.

Responsibilities:
  - Assemble the facade from a CalculatorConfig and an optional renderer.
Must not:
  - Implement calculator logic; composition only.
"""

from __future__ import annotations

from typing import Optional

from tapcalc.app_api.config import CalculatorConfig
from tapcalc.app_api.facade import CalculatorApplication
from tapcalc.app_api.ports import DisplayRenderer


def build_calculator_app(
    config: CalculatorConfig,
    renderer: Optional[DisplayRenderer] = None,
) -> CalculatorApplication:
    return CalculatorApplication(
        variant=config.variant,
        initial_angle_mode=config.initial_angle_mode,
        renderer=renderer,
    )
