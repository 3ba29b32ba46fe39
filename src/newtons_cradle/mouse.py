# MIT License (see LICENSE)
"""
Mouse dragging of cradle spheres.

MouseConstraint picks the sphere under the pointer and ties it to a
kinematic "mouse body" with a pymunk PivotJoint. The joint is soft: its
error bias is derived from a stiffness in (0, 1], so the sphere trails
the pointer instead of snapping to it.

Events:
    "mousedown": pointer pressed. event.body is the grabbed body or None.
    "mousemove": pointer moved.
    "mouseup":   pointer released. event.body is the body that was held.

Example:
    mouse = MouseConstraint(world, stiffness=0.2)
    mouse.on("mouseup", lambda e: print(e.pointer))
    mouse.press((337, 300))
    mouse.move((320, 250))
    mouse.release((320, 250))
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
import pymunk

from .util import as_tuple, f64
from .world import World


@dataclass(frozen=True)
class MouseEvent:
    """
    Pointer event raised by MouseConstraint.

    Attributes:
        name: "mousedown", "mousemove" or "mouseup".
        pointer: Pointer position in world coordinates.
        body: Engaged body, or None.
        body_position: Copy of the engaged body's centre, or None.
    """
    name: str
    pointer: np.ndarray
    body: pymunk.Body | None = None
    body_position: np.ndarray | None = None


class MouseConstraint:
    """
    Drags dynamic bodies of a World with the pointer.

    Attributes:
        world: World the drag joint is added to.
        stiffness: Joint stiffness in (0, 1]. 1 follows the pointer rigidly.
        max_force: Cap on the force the joint may apply.
        position: Last known pointer position.
        body: Body currently held, or None.
        joint: Active drag joint, or None.
    """
    EVENTS = ("mousedown", "mousemove", "mouseup")

    def __init__(self, world: World, stiffness: float = 0.2, max_force: float = 50000.0):
        if not 0.0 < stiffness <= 1.0:
            raise ValueError(f"stiffness must be in (0, 1], got {stiffness}")
        self._logger = logging.getLogger(self.__class__.__name__)
        self.world = world
        self.stiffness = stiffness
        self.max_force = max_force
        # Kinematic bodies are driven by hand and need not be in the space.
        self.mouse_body = pymunk.Body(body_type=pymunk.Body.KINEMATIC)
        self.position = np.zeros(2, dtype=np.float64)
        self.body: pymunk.Body | None = None
        self.joint: pymunk.PivotJoint | None = None
        self._listeners: dict[str, list[Callable[[MouseEvent], None]]] = {name: [] for name in self.EVENTS}

    @property
    def error_bias(self) -> float:
        """Fraction of joint error left after one second."""
        return (1.0 - self.stiffness) ** 60

    @property
    def dragging(self) -> bool:
        return self.joint is not None

    def on(self, name: str, callback: Callable[[MouseEvent], None]) -> None:
        """Register a listener for one of EVENTS."""
        if name not in self._listeners:
            raise ValueError(f"Unknown mouse event: '{name}'")
        self._listeners[name].append(callback)

    def off(self, name: str, callback: Callable[[MouseEvent], None]) -> None:
        if callback in self._listeners.get(name, []):
            self._listeners[name].remove(callback)

    def _trigger(self, event: MouseEvent) -> None:
        for callback in list(self._listeners[event.name]):
            callback(event)

    def _set_pointer(self, pointer) -> None:
        self.position = f64(pointer)
        self.mouse_body.position = as_tuple(self.position)

    def press(self, pointer) -> pymunk.Body | None:
        """
        Pointer down: grab the body under the pointer, if any.

        Returns:
            The grabbed body, or None.
        """
        self._set_pointer(pointer)

        if self.joint is None:
            body = self.world.query_point(self.position)
            if body is not None:
                joint = pymunk.PivotJoint(self.mouse_body, body, (0.0, 0.0), body.world_to_local(as_tuple(self.position)))
                joint.max_force = self.max_force
                joint.error_bias = self.error_bias
                self.world.add_constraint(joint)
                self.joint, self.body = joint, body
                self._logger.debug("grabbed body at %s", tuple(body.position))

        body_position = f64(self.body.position) if self.body is not None else None
        self._trigger(MouseEvent("mousedown", self.position.copy(), self.body, body_position))
        return self.body

    def move(self, pointer) -> None:
        """Pointer moved: the held body follows through the joint."""
        self._set_pointer(pointer)
        body_position = f64(self.body.position) if self.body is not None else None
        self._trigger(MouseEvent("mousemove", self.position.copy(), self.body, body_position))

    def release(self, pointer) -> None:
        """Pointer up: drop the held body (if any) and raise mouseup."""
        self._set_pointer(pointer)
        body = self.body
        if self.joint is not None:
            self.world.remove_constraint(self.joint)
            self._logger.debug("released body at %s", tuple(body.position))
        self.joint, self.body = None, None

        body_position = f64(body.position) if body is not None else None
        self._trigger(MouseEvent("mouseup", self.position.copy(), body, body_position))

    def detach(self) -> None:
        """Drop any held body and all listeners. Safe to call repeatedly."""
        if self.joint is not None:
            self.world.remove_constraint(self.joint)
        self.joint, self.body = None, None
        for listeners in self._listeners.values():
            listeners.clear()
