# MIT License (see LICENSE)
"""
Cradle builder.

Builds the row of pendulum spheres and their pivot constraints:

    anchor_i = (x0 + i * radius * separation, y0)
    rest_i   = (x0 + i * radius * separation, y0 + length)

Each sphere hangs from a pin joint to a shared static anchor body, directly
below its anchor, so it swings in the vertical plane under gravity.
Spheres have infinite moment of inertia (they never spin), zero
friction and restitution 1, so momentum passes along the row on impact.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np
import pymunk

from .config import CradleConfig
from .constants import BALL_MASS, INITIAL_OFFSET, SEPARATION, SLOP_RATIO
from .materials import Material
from .util import as_tuple, f64
from .world import translate_body


@dataclass
class Pendulum:
    """
    One sphere of the cradle and its pivot.

    Attributes:
        index: Position in the row, 0 is leftmost.
        body: Engine body (unit mass, infinite moment).
        shape: Engine circle shape carrying the material.
        pivot: Pin joint from the static anchor to the body centre.
        anchor: World position of the pivot [x, y].
        rest_position: Centre of the sphere at rest [x, y].
    """
    index: int
    body: pymunk.Body
    shape: pymunk.Circle
    pivot: pymunk.PinJoint
    anchor: np.ndarray
    rest_position: np.ndarray

    @property
    def radius(self) -> float:
        return float(self.shape.radius)

    @property
    def position(self) -> np.ndarray:
        """Current centre of the sphere."""
        return f64(self.body.position)

    @property
    def velocity(self) -> np.ndarray:
        return f64(self.body.velocity)


@dataclass
class CradleComposite:
    """
    All pendulums of a cradle, managed as one unit.

    Attributes:
        pendulums: Pendulums ordered by index.
        slop: Contact slop handed to the engine.
        label: Display name.
        anchor_body: Static body at the world origin holding every pivot.
    """
    pendulums: list[Pendulum] = field(default_factory=list)
    slop: float = 0.0
    label: str = "Newtons Cradle"
    anchor_body: pymunk.Body = field(default_factory=lambda: pymunk.Body(body_type=pymunk.Body.STATIC))

    def __len__(self) -> int:
        return len(self.pendulums)

    @property
    def bodies(self) -> list[pymunk.Body]:
        return [p.body for p in self.pendulums]

    @property
    def shapes(self) -> list[pymunk.Circle]:
        return [p.shape for p in self.pendulums]

    @property
    def constraints(self) -> list[pymunk.PinJoint]:
        return [p.pivot for p in self.pendulums]

    @property
    def anchors(self) -> np.ndarray:
        """Pivot anchors, shape [N, 2]."""
        return np.array([p.anchor for p in self.pendulums], dtype=np.float64)

    @property
    def rest_positions(self) -> np.ndarray:
        """Resting sphere centres, shape [N, 2]."""
        return np.array([p.rest_position for p in self.pendulums], dtype=np.float64)

    @property
    def positions(self) -> np.ndarray:
        """Current sphere centres, shape [N, 2]."""
        return np.array([p.position for p in self.pendulums], dtype=np.float64)

    def translate(self, index: int, delta: tuple[float, float] | np.ndarray) -> None:
        """Move pendulum `index` by delta, leaving its pivot anchor in place."""
        translate_body(self.pendulums[index].body, delta)


def _air_drag(friction_air: float):
    """Velocity update that damps the body by friction_air per second."""
    def velocity_func(body, gravity, damping, dt):
        pymunk.Body.update_velocity(body, gravity, damping * (1.0 - friction_air), dt)
    return velocity_func


def newtons_cradle(
    x0: float,
    y0: float,
    count: int,
    radius: float,
    length: float,
    separation: float = SEPARATION,
    slop_ratio: float = SLOP_RATIO,
    material: Material | None = None,
) -> CradleComposite:
    """
    Create the cradle bodies and pivots, all at rest.

    Args:
        x0, y0: Anchor of the leftmost pivot.
        count: Number of spheres (>= 1).
        radius: Sphere radius (> 0).
        length: Arm length from anchor to sphere centre (>= 0).
        separation: Anchor spacing as a multiple of radius.
        slop_ratio: Contact slop as a fraction of radius.
        material: Sphere surface properties (ideal cradle by default).

    Raises:
        ValueError: On count < 1, radius <= 0 or length < 0.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    if radius <= 0:
        raise ValueError(f"radius must be positive, got {radius}")
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    material = material or Material()
    composite = CradleComposite(slop=radius * slop_ratio)

    for i in range(count):
        x = x0 + i * (radius * separation)
        anchor = f64((x, y0))
        rest = f64((x, y0 + length))

        body = pymunk.Body(BALL_MASS, float("inf"))
        body.position = as_tuple(rest)
        if material.friction_air > 0:
            body.velocity_func = _air_drag(material.friction_air)

        shape = pymunk.Circle(body, radius)
        shape.elasticity = material.restitution
        shape.friction = material.friction

        # Pin length is taken from the positions at creation, so the body
        # must already sit at rest here.
        pivot = pymunk.PinJoint(composite.anchor_body, body, as_tuple(anchor), (0.0, 0.0))

        composite.pendulums.append(Pendulum(i, body, shape, pivot, anchor, rest))

    return composite


def build_cradle(
    x0: float,
    y0: float,
    count: int,
    radius: float,
    length: float,
    initial_offset: tuple[float, float] = INITIAL_OFFSET,
    **kwargs,
) -> CradleComposite:
    """
    Build a cradle ready to swing.

    Same as newtons_cradle(), then sphere 0 is moved by initial_offset
    (default up and to the left) so it falls into the row once the
    simulation starts.
    """
    composite = newtons_cradle(x0, y0, count, radius, length, **kwargs)
    composite.translate(0, initial_offset)
    return composite


def cradle_from_config(config: CradleConfig) -> CradleComposite:
    """Build the cradle described by a CradleConfig."""
    x0, y0 = config.origin
    return build_cradle(
        x0, y0, config.count, config.radius, config.length,
        initial_offset=config.initial_offset,
        separation=config.separation,
        slop_ratio=config.slop_ratio,
        material=config.material,
    )
