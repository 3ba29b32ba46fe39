# MIT License (see LICENSE)
"""
Gesture analysis: turning a mouse drag into release kinematics.

A GestureAnalyzer is a two-state machine (Idle, Dragging). A drag start
records where the grabbed sphere was and when; the matching drag end
produces a Readout:

  velocity = (release_pointer - start_body_position) / dt
  angle    = atan2(vy, vx)                      [degrees, (-180, 180]]
  force    = m * |velocity - last_velocity| / FORCE_TIMESTEP

dt is wall-clock time since the last sample; FORCE_TIMESTEP is a fixed
1/60 s. The two are deliberately not unified.

Note:
    The displacement runs from the sphere's position at grab time to the
    pointer at release. The pointer's own start position is recorded on
    the session but does not enter the formula, so grabbing a sphere off
    centre biases the velocity by the grab offset.
"""
from __future__ import annotations
import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

from .constants import BALL_MASS, DEFAULT_SAMPLE_DT, FORCE_TIMESTEP
from .util import f64, norm


@dataclass(frozen=True)
class Readout:
    """
    Kinematic readout shown after a completed drag.

    Attributes:
        angle: Release direction in degrees.
        force: Estimated release force in newtons.
    """
    angle: float = 0.0
    force: float = 0.0

    def format_angle(self) -> str:
        return f"Angle: {self.angle:.2f} degrees"

    def format_force(self) -> str:
        return f"Force: {self.force:.2f} N"

    def lines(self) -> list[str]:
        """Display lines, angle first."""
        return [self.format_angle(), self.format_force()]


@dataclass
class DragSession:
    """
    State captured when a drag starts.

    Attributes:
        body_position: Centre of the grabbed sphere at grab time (a copy).
        pointer_position: Pointer at grab time. Recorded, not used.
        started_at: Wall-clock time of the grab in seconds.
    """
    body_position: np.ndarray
    pointer_position: np.ndarray
    started_at: float


def calculate_velocity(start: np.ndarray, end: np.ndarray, dt: float) -> np.ndarray:
    """Average velocity moving from start to end in dt seconds."""
    return (f64(end) - f64(start)) / dt


def calculate_angle(velocity: np.ndarray) -> float:
    """
    Direction of a velocity in degrees, in (-180, 180].

    Scale invariant for positive factors. A zero vector yields 0.
    """
    angle = math.degrees(math.atan2(velocity[1], velocity[0]))
    # atan2 returns -180 for (-x, -0.0); fold it onto +180
    if angle <= -180.0:
        angle += 360.0
    return angle


def calculate_force(
    velocity: np.ndarray,
    last_velocity: np.ndarray,
    timestep: float = FORCE_TIMESTEP,
    mass: float = BALL_MASS,
) -> float:
    """
    Finite-difference force estimate F = m * |dv| / timestep.
    """
    delta = f64(velocity) - f64(last_velocity)
    return mass * (norm(delta) / timestep)


class GestureAnalyzer:
    """
    Converts drag start/end events on one sphere into a Readout.

    Usage:
        analyzer = GestureAnalyzer()
        analyzer.subscribe(lambda readout: print(readout.lines()))
        analyzer.on_drag_start(pointer, body_position)
        ...
        readout = analyzer.on_drag_end(pointer)

    Attributes:
        readout: Last published Readout ({0, 0} until the first drag ends).
        last_velocity: Velocity of the previous sample (velocity memory).
        last_timestamp: Wall-clock time of the previous sample or grab.
        session: Active DragSession, or None when idle.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        sample_dt: float = DEFAULT_SAMPLE_DT,
        force_timestep: float = FORCE_TIMESTEP,
        mass: float = BALL_MASS,
    ):
        """
        Args:
            clock: Wall-clock source in seconds.
            sample_dt: Velocity interval used when no usable timestamp exists.
            force_timestep: Fixed timestep of the force estimate.
            mass: Mass assumed for the dragged sphere.
        """
        if sample_dt <= 0 or force_timestep <= 0:
            raise ValueError("sample_dt and force_timestep must be positive")
        self._logger = logging.getLogger(self.__class__.__name__)
        self._clock = clock
        self.sample_dt = sample_dt
        self.force_timestep = force_timestep
        self.mass = mass
        self._subscribers: list[Callable[[Readout], None]] = []
        self.reset()

    def reset(self) -> None:
        """Drop the active session, velocity memory and readout."""
        self.session: DragSession | None = None
        self.last_velocity = np.zeros(2, dtype=np.float64)
        self.last_timestamp: float | None = None
        self.readout = Readout()

    @property
    def dragging(self) -> bool:
        return self.session is not None

    @property
    def angle(self) -> float:
        return self.readout.angle

    @property
    def force(self) -> float:
        return self.readout.force

    def subscribe(self, callback: Callable[[Readout], None]) -> Callable[[Readout], None]:
        """Call `callback(readout)` after every completed drag. Returns callback."""
        self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[[Readout], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def on_drag_start(self, pointer, body_position) -> bool:
        """
        Idle -> Dragging.

        Args:
            pointer: Pointer position at grab time.
            body_position: Centre of the grabbed sphere at grab time.

        Returns:
            True if a session was opened, False if one was already active.
        """
        if self.session is not None:
            self._logger.debug("drag start ignored, session already active")
            return False

        now = self._clock()
        self.session = DragSession(
            body_position=f64(body_position),
            pointer_position=f64(pointer),
            started_at=now,
        )
        self.last_timestamp = now
        self._logger.debug("drag start at body %s", self.session.body_position)
        return True

    def on_drag_end(self, pointer) -> Readout:
        """
        Dragging -> Idle, publishing a new Readout.

        A release without an active session is ignored: nothing changes and
        the current readout is returned.
        """
        if self.session is None:
            self._logger.debug("drag end ignored, no active session")
            return self.readout

        session, self.session = self.session, None

        velocity = self._sample_velocity(session.body_position, f64(pointer))
        angle = calculate_angle(velocity)
        force = self._estimate_force(velocity)

        self.readout = Readout(angle=angle, force=force)
        self._logger.info("%s, %s", self.readout.format_angle(), self.readout.format_force())
        for callback in list(self._subscribers):
            callback(self.readout)
        return self.readout

    def _sample_velocity(self, start: np.ndarray, end: np.ndarray) -> np.ndarray:
        """Velocity since the last timestamp; advances the timestamp."""
        now = self._clock()
        if self.last_timestamp is None:
            dt = self.sample_dt
        else:
            dt = now - self.last_timestamp
            if dt <= 0:
                # clock did not advance; avoid dividing by zero
                dt = self.sample_dt
        self.last_timestamp = now
        return calculate_velocity(start, end, dt)

    def _estimate_force(self, velocity: np.ndarray) -> float:
        """Force from the change against velocity memory; updates memory."""
        force = calculate_force(velocity, self.last_velocity, self.force_timestep, self.mass)
        self.last_velocity = velocity.copy()
        return force
