from __future__ import annotations

from typing import Callable, Dict, Optional

from tapcalc.app_api.config import load_profile
from tapcalc.app_api.facade import CalculatorApplication
from tapcalc.app_api.ports import DisplayRenderer
from .build_app import build_calculator_app

AppBuilder = Callable[[Optional[DisplayRenderer]], CalculatorApplication]


class AppFactory:
    def __init__(self) -> None:
        self._registry: Dict[str, AppBuilder] = {}

    def register(self, name: str, builder: AppBuilder) -> None:
        self._registry[name] = builder

    def create(self, name: str, renderer: Optional[DisplayRenderer] = None) -> CalculatorApplication:
        if name not in self._registry:
            raise ValueError(f"Unknown calculator profile: {name}")
        return self._registry[name](renderer)

    def names(self) -> list[str]:
        return sorted(self._registry)


def _profile_builder(name: str) -> AppBuilder:
    def build(renderer: Optional[DisplayRenderer]) -> CalculatorApplication:
        return build_calculator_app(load_profile(name), renderer=renderer)

    return build


default_app_factory = AppFactory()
default_app_factory.register("basic", _profile_builder("basic"))
default_app_factory.register("scientific", _profile_builder("scientific"))

__all__ = ["AppFactory", "default_app_factory"]
