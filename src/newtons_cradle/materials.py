# MIT License (see LICENSE)
"""
Material properties for the cradle spheres.

The defaults describe an ideal cradle: no surface friction, no air
drag and perfectly elastic collisions.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Material:
    """
    Physical surface properties for collision response.

    Attributes:
        friction: Coulomb friction coefficient passed to the engine shape.
                  0 = frictionless.
        friction_air: Fraction of velocity lost per second of simulated
                      time. 0 = no drag.
        restitution: Coefficient of restitution (engine "elasticity").
                     1 = perfectly elastic, energy preserved on impact.
    """
    friction: float = 0.0
    friction_air: float = 0.0
    restitution: float = 1.0

    def __post_init__(self) -> None:
        if self.friction < 0:
            raise ValueError(f"friction must be non-negative, got {self.friction}")
        if not 0.0 <= self.friction_air < 1.0:
            raise ValueError(f"friction_air must be in [0, 1), got {self.friction_air}")
        if not 0.0 <= self.restitution <= 1.0:
            raise ValueError(f"restitution must be in [0, 1], got {self.restitution}")
