"""Port definitions for app-level collaborators.

Responsibilities:
  - Define interface contracts for the presentation layer.
Must not:
  - Implement logic; interfaces only.
"""

from __future__ import annotations

from typing import Protocol

from .dto import Observation


class DisplayRenderer(Protocol):
    def render(self, observation: Observation) -> None:
        ...
