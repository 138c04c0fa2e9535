from .app_factory import AppFactory, default_app_factory
from .build_app import build_calculator_app

__all__ = [
    "AppFactory",
    "default_app_factory",
    "build_calculator_app",
]
"""Factory helpers for building calculator applications."""
