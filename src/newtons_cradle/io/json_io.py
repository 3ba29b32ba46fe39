# MIT License (see LICENSE)
"""
JSON serialization for demo configurations.

Only fields that differ from CradleConfig defaults are written, so a
saved file reads as a list of overrides.

JSON Schema Overview:
---------------------
{
  "origin": [x, y],                # Leftmost pivot, default [280, 100]
  "count": int,                    # Spheres, default 5
  "radius": float,                 # Default 30
  "length": float,                 # Arm length, default 200
  "separation": float,             # Default 1.9
  "slopRatio": float,              # Default 0.02
  "initialOffset": [dx, dy],       # Default [-180, -100]
  "material": {                    # Optional
    "friction": float,             # Default 0
    "frictionAir": float,          # Default 0
    "restitution": float           # Default 1
  },
  "gravity": [gx, gy],             # px/s^2, default [0, 1000]
  "width": int, "height": int,     # Default 800 x 600
  "viewport": {"min": [x, y], "max": [x, y]},
  "mouseStiffness": float,         # Default 0.2
  "dt": float,                     # Default 1/60
  "showVelocity": bool             # Default true
}
"""
from __future__ import annotations
import json
from typing import Any

from ..config import CradleConfig
from ..materials import Material

# JSON key -> CradleConfig field, for plain scalar/pair fields
_KEYS = {
    "origin": "origin",
    "count": "count",
    "radius": "radius",
    "length": "length",
    "separation": "separation",
    "slopRatio": "slop_ratio",
    "initialOffset": "initial_offset",
    "gravity": "gravity",
    "width": "width",
    "height": "height",
    "mouseStiffness": "mouse_stiffness",
    "dt": "dt",
    "showVelocity": "show_velocity",
}

_PAIRS = {"origin", "initial_offset", "gravity"}
_INTS = {"count", "width", "height"}


def _pair(value: Any, key: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"'{key}' must be a pair [x, y], got {value!r}")
    return (float(value[0]), float(value[1]))


def config_from_json(data: dict[str, Any]) -> CradleConfig:
    """
    Build a CradleConfig from a JSON-compatible dictionary.

    Missing keys take CradleConfig defaults; unknown keys are ignored.

    Raises:
        ValueError: On malformed values or values CradleConfig rejects.
    """
    kwargs: dict[str, Any] = {}
    for key, name in _KEYS.items():
        if key not in data:
            continue
        value = data[key]
        if name in _PAIRS:
            kwargs[name] = _pair(value, key)
        elif name in _INTS:
            kwargs[name] = int(value)
        elif name == "show_velocity":
            kwargs[name] = bool(value)
        else:
            kwargs[name] = float(value)

    if "material" in data:
        mat = data["material"]
        kwargs["material"] = Material(
            friction=float(mat.get("friction", 0.0)),
            friction_air=float(mat.get("frictionAir", 0.0)),
            restitution=float(mat.get("restitution", 1.0)),
        )

    if "viewport" in data:
        view = data["viewport"]
        if "min" in view:
            kwargs["viewport_min"] = _pair(view["min"], "viewport.min")
        if "max" in view:
            kwargs["viewport_max"] = _pair(view["max"], "viewport.max")

    return CradleConfig(**kwargs)


def config_to_json(config: CradleConfig) -> dict[str, Any]:
    """
    Serialize a CradleConfig, skipping fields left at their defaults.
    """
    defaults = CradleConfig()
    result: dict[str, Any] = {}

    for key, name in _KEYS.items():
        value = getattr(config, name)
        if value == getattr(defaults, name):
            continue
        result[key] = list(value) if name in _PAIRS else value

    if config.material != defaults.material:
        result["material"] = {
            "friction": config.material.friction,
            "frictionAir": config.material.friction_air,
            "restitution": config.material.restitution,
        }

    if config.viewport_min != defaults.viewport_min or config.viewport_max != defaults.viewport_max:
        result["viewport"] = {
            "min": list(config.viewport_min),
            "max": list(config.viewport_max),
        }

    return result


def load_config_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a configuration file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> CradleConfig:
    """
    Load a CradleConfig from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a value is malformed or out of range.
    """
    return config_from_json(load_config_raw(path))


def save_config(config: CradleConfig, path: str, indent: int = 2) -> None:
    """Save a CradleConfig to a JSON file on disk."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)
