# MIT License (see LICENSE)
"""
Demo configuration.

CradleConfig collects every tunable of the demo in one frozen dataclass:
cradle placement, world gravity, render surface and viewport, and mouse
stiffness. The defaults reproduce the reference layout of five 30px
spheres hanging 200px below (280, 100) in an 800x600 window.

See io.json_io for loading and saving configurations.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .constants import CANVAS_SIZE, INITIAL_OFFSET, SEPARATION, SLOP_RATIO, STEP_DT
from .materials import Material


@dataclass(frozen=True)
class CradleConfig:
    """
    Parameters for building and running the cradle demo.

    Attributes:
        origin: Anchor of the leftmost pivot (x0, y0) in pixels.
        count: Number of spheres.
        radius: Sphere radius in pixels.
        length: Arm length from pivot to sphere centre in pixels.
        separation: Pivot spacing as a multiple of radius.
        slop_ratio: Engine contact slop as a fraction of radius.
        initial_offset: Translation applied to sphere 0 after building.
        material: Sphere surface properties.
        gravity: World gravity in px/s^2 (y points down).
        width, height: Render surface size in logical units.
        viewport_min, viewport_max: World rectangle the viewport frames.
        mouse_stiffness: Stiffness of the drag constraint in (0, 1].
        dt: Fixed physics timestep in seconds.
        show_velocity: Draw velocity vectors on moving spheres.
    """
    origin: tuple[float, float] = (280.0, 100.0)
    count: int = 5
    radius: float = 30.0
    length: float = 200.0
    separation: float = SEPARATION
    slop_ratio: float = SLOP_RATIO
    initial_offset: tuple[float, float] = INITIAL_OFFSET
    material: Material = field(default_factory=Material)

    gravity: tuple[float, float] = (0.0, 1000.0)

    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    viewport_min: tuple[float, float] = (0.0, 50.0)
    viewport_max: tuple[float, float] = (800.0, 600.0)
    show_velocity: bool = True

    mouse_stiffness: float = 0.2
    dt: float = STEP_DT

    def __post_init__(self) -> None:
        """Reject values the builder or engine cannot work with."""
        if self.count < 1:
            raise ValueError(f"count must be >= 1, got {self.count}")
        if self.radius <= 0:
            raise ValueError(f"radius must be positive, got {self.radius}")
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"surface size must be positive, got ({self.width}, {self.height})")
        if not 0.0 < self.mouse_stiffness <= 1.0:
            raise ValueError(f"mouse_stiffness must be in (0, 1], got {self.mouse_stiffness}")
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
