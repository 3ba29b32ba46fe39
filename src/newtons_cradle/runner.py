# MIT License (see LICENSE)
"""
Fixed-timestep runner.

The app's frame loop reports real elapsed time; the runner converts it
into a whole number of fixed physics steps, carrying the remainder
to the next frame. A cap on steps per tick keeps a long stall (window
drag, breakpoint) from triggering a burst of catch-up steps.
"""
from __future__ import annotations
import logging

from .constants import STEP_DT
from .world import World


class Runner:
    """
    Steps a World at a fixed rate.

    Usage:
        runner = Runner(world)
        runner.start()
        while running:
            runner.tick(frame_seconds)
        runner.stop()

    Attributes:
        world: World being stepped.
        delta: Fixed step size in seconds.
        max_steps: Maximum steps per tick.
        enabled: False when stopped; tick() is then a no-op.
        steps: Total steps taken.
    """

    def __init__(self, world: World, delta: float = STEP_DT, max_steps: int = 5):
        if delta <= 0:
            raise ValueError(f"delta must be positive, got {delta}")
        self._logger = logging.getLogger(self.__class__.__name__)
        self.world = world
        self.delta = delta
        self.max_steps = max_steps
        self.enabled = False
        self.steps = 0
        self._accumulator = 0.0

    def start(self) -> None:
        self.enabled = True
        self._accumulator = 0.0
        self._logger.debug("runner started, delta=%.5f", self.delta)

    def stop(self) -> None:
        """Stop stepping. Safe to call when already stopped."""
        if self.enabled:
            self._logger.debug("runner stopped after %d steps", self.steps)
        self.enabled = False
        self._accumulator = 0.0

    def tick(self, elapsed: float) -> int:
        """
        Consume `elapsed` seconds of real time.

        Returns:
            Number of physics steps taken.
        """
        if not self.enabled:
            return 0

        self._accumulator += max(elapsed, 0.0)
        n = 0
        # small tolerance so 1/60 accumulated 60 times yields 60 steps
        while self._accumulator + 1e-9 >= self.delta and n < self.max_steps:
            self.world.step(self.delta)
            self._accumulator -= self.delta
            n += 1

        if n == self.max_steps and self._accumulator + 1e-9 >= self.delta:
            # backlog beyond the cap is dropped, the remainder of a step is kept
            self._accumulator = 0.0
        self.steps += n
        return n
