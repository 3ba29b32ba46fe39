# MIT License (see LICENSE)
"""
Small 2D vector helpers.

Vectors are numpy float64 arrays of shape (2,). Engine types such as
pymunk's Vec2d are plain tuples and convert through f64().
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Accepts tuples, lists and pymunk Vec2d so engine positions and
    pointer samples share one representation.
    """
    return np.array(x, dtype=np.float64)


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.hypot(v[0], v[1]))


def as_tuple(v) -> tuple[float, float]:
    """Plain (x, y) float tuple, the form pymunk setters expect."""
    return (float(v[0]), float(v[1]))
