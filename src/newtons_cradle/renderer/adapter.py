# MIT License (see LICENSE)
"""
Renderer adapters for the cradle demo.

This module provides the abstract renderer interface, the viewport math
shared by all renderers, and two headless implementations. The pygame
window lives in pygame_renderer.py.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

import numpy as np

from ..constants import CANVAS_SIZE
from ..util import f64

if TYPE_CHECKING:
    from ..cradle import Pendulum
    from ..world import World


@dataclass(frozen=True)
class Viewport:
    """
    World rectangle shown on the render surface.

    Attributes:
        min: Top-left world corner [x, y].
        max: Bottom-right world corner [x, y].
        width, height: Surface size in logical units.
    """
    min: tuple[float, float]
    max: tuple[float, float]
    width: int
    height: int

    @property
    def scale(self) -> float:
        """Surface units per world unit (equal on both axes)."""
        return self.width / (self.max[0] - self.min[0])

    def world_to_screen(self, point) -> np.ndarray:
        return (f64(point) - f64(self.min)) * self.scale

    def screen_to_world(self, point) -> np.ndarray:
        return f64(point) / self.scale + f64(self.min)


def fit_viewport(
    bounds_min: tuple[float, float],
    bounds_max: tuple[float, float],
    width: int = CANVAS_SIZE[0],
    height: int = CANVAS_SIZE[1],
    padding: tuple[float, float] = (0.0, 0.0),
    center: bool = True,
) -> Viewport:
    """
    Fit a world rectangle into a width x height surface.

    The rectangle is grown along one axis until it matches the surface
    aspect ratio, so nothing is stretched, then optionally centred on
    the requested region and padded.

    Example:
        800x550 region (0, 50)-(800, 600) on an 800x600 surface
        -> (0, 25)-(800, 625)
    """
    bounds_width = bounds_max[0] - bounds_min[0] + 2 * padding[0]
    bounds_height = bounds_max[1] - bounds_min[1] + 2 * padding[1]
    if bounds_width <= 0 or bounds_height <= 0:
        raise ValueError(f"Viewport bounds must have positive size, got {bounds_min} to {bounds_max}")

    outer_ratio = height / width
    inner_ratio = bounds_height / bounds_width
    scale_x, scale_y = 1.0, 1.0
    if inner_ratio > outer_ratio:
        scale_x = inner_ratio / outer_ratio
    else:
        scale_y = outer_ratio / inner_ratio

    min_x, min_y = float(bounds_min[0]), float(bounds_min[1])
    max_x = min_x + bounds_width * scale_x
    max_y = min_y + bounds_height * scale_y

    if center:
        shift_x = bounds_width * 0.5 - (bounds_width * scale_x) * 0.5
        shift_y = bounds_height * 0.5 - (bounds_height * scale_y) * 0.5
        min_x, max_x = min_x + shift_x, max_x + shift_x
        min_y, max_y = min_y + shift_y, max_y + shift_y

    min_x -= padding[0]
    max_x -= padding[0]
    min_y -= padding[1]
    max_y -= padding[1]

    return Viewport((min_x, min_y), (max_x, max_y), width, height)


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing primitives; render_world() drives
    them for every pendulum in the world.

    Usage:
        renderer.start()
        renderer.look_at((0, 50), (800, 600))
        renderer.render_world(world, overlay=readout.lines())
        renderer.stop()
    """
    width: int = CANVAS_SIZE[0]
    height: int = CANVAS_SIZE[1]
    viewport: Viewport | None = None
    running: bool = False

    def start(self) -> None:
        """Open the render surface. Headless renderers just mark running."""
        self.running = True

    def stop(self) -> None:
        """Close the render surface. Must be safe to call repeatedly."""
        self.running = False

    def look_at(self, bounds_min: tuple[float, float], bounds_max: tuple[float, float]) -> Viewport:
        """Frame the given world rectangle on the surface."""
        self.viewport = fit_viewport(bounds_min, bounds_max, self.width, self.height)
        return self.viewport

    def to_world(self, point) -> np.ndarray:
        """Convert a surface point (e.g. a mouse position) to world space."""
        if self.viewport is None:
            return f64(point)
        return self.viewport.screen_to_world(point)

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_pendulum(self, pendulum: "Pendulum") -> None:
        """Draw one sphere and its arm."""
        ...

    def draw_overlay(self, lines: Sequence[str]) -> None:
        """Draw text lines (the readout). Optional."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_world(self, world: "World", overlay: Sequence[str] = ()) -> None:
        """Render every pendulum of every composite, then the overlay."""
        self.begin_frame(world.time)
        for composite in world.composites:
            for pendulum in composite.pendulums:
                self.draw_pendulum(pendulum)
        if overlay:
            self.draw_overlay(overlay)
        self.end_frame()


class NullRenderer(RendererAdapter):
    """
    No-op renderer.

    Useful for headless runs and benchmarks.
    """

    def __init__(self, width: int = CANVAS_SIZE[0], height: int = CANVAS_SIZE[1]):
        self.width = width
        self.height = height

    def begin_frame(self, time: float) -> None:
        pass

    def draw_pendulum(self, pendulum: "Pendulum") -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frame data instead of drawing.

    Example:
        renderer = BufferedRenderer()
        for _ in range(60):
            world.step()
            renderer.render_world(world)

        for frame in renderer.frames:
            print(frame["time"], frame["pendulums"][0]["position"])
    """

    def __init__(self, width: int = CANVAS_SIZE[0], height: int = CANVAS_SIZE[1]):
        self.width = width
        self.height = height
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "pendulums": [],
            "overlay": [],
        }

    def draw_pendulum(self, pendulum: "Pendulum") -> None:
        if self._current_frame is None:
            return
        self._current_frame["pendulums"].append({
            "index": pendulum.index,
            "anchor": pendulum.anchor.tolist(),
            "position": pendulum.position.tolist(),
            "velocity": pendulum.velocity.tolist(),
            "radius": pendulum.radius,
        })

    def draw_overlay(self, lines: Sequence[str]) -> None:
        if self._current_frame is not None:
            self._current_frame["overlay"] = list(lines)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
