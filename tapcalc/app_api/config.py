from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tapcalc.core.domain.enums import AngleMode, Variant


@dataclass(frozen=True)
class CalculatorConfig:
    profile: str
    description: str
    variant: Variant
    initial_angle_mode: AngleMode | None


def _profiles_dir() -> Path:
    return Path(__file__).resolve().parent / "profiles"


def available_profiles() -> list[str]:
    return sorted(path.stem for path in _profiles_dir().glob("*.json"))


def _require(payload: dict[str, Any], key: str, expected_type: type) -> Any:
    if key not in payload:
        raise ValueError(f"Missing required field '{key}' in calculator config")
    value = payload[key]
    if not isinstance(value, expected_type):
        raise ValueError(f"Field '{key}' must be {expected_type.__name__}")
    return value


def _parse_variant(raw: str) -> Variant:
    try:
        return Variant(raw)
    except ValueError as exc:
        allowed = ", ".join(v.value for v in Variant)
        raise ValueError(f"Field 'variant' must be one of: {allowed}") from exc


def _parse_angle_mode(raw: str) -> AngleMode:
    try:
        return AngleMode(raw)
    except ValueError as exc:
        allowed = ", ".join(m.value for m in AngleMode)
        raise ValueError(f"Field 'initial_angle_mode' must be one of: {allowed}") from exc


def parse_config(payload: Any) -> CalculatorConfig:
    if not isinstance(payload, dict):
        raise ValueError("Calculator config must be a JSON object")

    variant = _parse_variant(_require(payload, "variant", str))

    initial_angle_mode: AngleMode | None = None
    if payload.get("initial_angle_mode") is not None:
        if variant != Variant.SCIENTIFIC:
            raise ValueError("Field 'initial_angle_mode' requires variant 'scientific'")
        initial_angle_mode = _parse_angle_mode(_require(payload, "initial_angle_mode", str))
    elif variant == Variant.SCIENTIFIC:
        initial_angle_mode = AngleMode.DEGREES

    description = ""
    if "description" in payload:
        description = _require(payload, "description", str)

    return CalculatorConfig(
        profile=_require(payload, "profile", str),
        description=description,
        variant=variant,
        initial_angle_mode=initial_angle_mode,
    )


def load_config(path: str | Path) -> CalculatorConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"Calculator config not found: {config_path}")
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Calculator config is not valid JSON: {config_path}") from exc
    return parse_config(payload)


def load_profile(name: str) -> CalculatorConfig:
    profile_path = _profiles_dir() / f"{name}.json"
    if not profile_path.exists():
        raise ValueError(f"Unknown calculator profile: {name}")

    config = load_config(profile_path)
    if config.profile != name:
        raise ValueError(
            f"profile mismatch: requested '{name}', config has '{config.profile}'"
        )
    return config
