# MIT License (see LICENSE)
"""
Input/Output utilities for the cradle demo.

This subpackage provides JSON serialization of CradleConfig.

Typical usage:
    from newtons_cradle.io import load_config, save_config

    config = load_config("cradle.json")
    save_config(config, "output.json")
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_to_json,
    config_from_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_to_json",
    "config_from_json",
]
