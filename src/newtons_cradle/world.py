# MIT License (see LICENSE)
"""
The simulated world the cradle lives in.

World is a thin container around a pymunk Space. pymunk (Chipmunk2D)
does the actual rigid body work: integration, collision detection,
contact and joint solving. World only adds what the demo needs on top:
- Grouping bodies into composites (see cradle.CradleComposite).
- Point queries for mouse picking.
- Idempotent teardown.

Structure:
    - App creates a World.
    - Composites are added via add_composite().
    - A Runner calls world.step() at a fixed timestep.
    - clear() empties the space on teardown.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
import pymunk

from .constants import STEP_DT
from .util import as_tuple

if TYPE_CHECKING:
    from .cradle import CradleComposite


def translate_body(body: pymunk.Body, delta: tuple[float, float] | np.ndarray) -> None:
    """
    Move a body by delta without changing its velocity.

    If the body already belongs to a space its shapes are reindexed so
    point queries and collision detection see the new position at once.
    """
    x, y = body.position
    body.position = (x + float(delta[0]), y + float(delta[1]))
    if body.space is not None:
        body.space.reindex_shapes_for_body(body)


@dataclass
class World:
    """
    Rigid body world backed by a pymunk Space.

    Attributes:
        gravity: Global gravity vector in px/s^2 (y down, default [0, 1000]).
        dt: Default step size in seconds (default 1/60).
        iterations: Solver iterations per step handed to pymunk.
        composites: Composites added to the world, in insertion order.
        time: Simulated time elapsed in seconds.
    """
    gravity: tuple[float, float] = (0.0, 1000.0)
    dt: float = STEP_DT
    iterations: int = 10

    composites: list[CradleComposite] = field(default_factory=list)
    time: float = 0.0

    def __post_init__(self) -> None:
        """Create the engine space."""
        self._logger = logging.getLogger(self.__class__.__name__)
        self.space = pymunk.Space()
        self.space.gravity = as_tuple(self.gravity)
        self.space.iterations = self.iterations

    @property
    def bodies(self) -> list[pymunk.Body]:
        """All dynamic bodies currently in the space."""
        return [b for b in self.space.bodies if b.body_type == pymunk.Body.DYNAMIC]

    @property
    def constraints(self) -> list[pymunk.Constraint]:
        """All constraints currently in the space, including drag joints."""
        return list(self.space.constraints)

    def add_composite(self, composite: CradleComposite) -> None:
        """
        Add every body, shape and constraint of a composite to the space.

        The engine's collision slop is space wide, so the composite's slop
        replaces the current value.
        """
        self.space.add(composite.anchor_body, *composite.bodies, *composite.shapes, *composite.constraints)
        self.space.collision_slop = composite.slop
        self.composites.append(composite)
        self._logger.debug("added composite '%s' with %d bodies", composite.label, len(composite.bodies))

    def add_constraint(self, constraint: pymunk.Constraint) -> None:
        """Add a standalone constraint (e.g. a mouse drag joint)."""
        self.space.add(constraint)

    def remove_constraint(self, constraint: pymunk.Constraint) -> None:
        """Remove a standalone constraint. Unknown constraints are ignored."""
        if constraint in self.space.constraints:
            self.space.remove(constraint)

    def query_point(self, point: tuple[float, float] | np.ndarray) -> pymunk.Body | None:
        """
        Find the dynamic body whose shape contains the world point.

        Used for mouse picking.

        Returns:
            The body under the point, or None.
        """
        info = self.space.point_query_nearest(as_tuple(point), 0.0, pymunk.ShapeFilter())
        if info is None or info.shape is None:
            return None
        body = info.shape.body
        if body.body_type != pymunk.Body.DYNAMIC:
            return None
        return body

    def step(self, dt: float | None = None) -> None:
        """Advance the simulation by dt seconds (defaults to self.dt)."""
        dt = self.dt if dt is None else dt
        self.space.step(dt)
        self.time += dt

    def clear(self) -> None:
        """
        Remove all bodies, shapes and constraints from the space.

        Safe to call any number of times.
        """
        items = [*self.space.constraints, *self.space.shapes, *self.space.bodies]
        if items:
            self.space.remove(*items)
            self._logger.debug("cleared %d items from space", len(items))
        self.composites.clear()
