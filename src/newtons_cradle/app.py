# MIT License (see LICENSE)
"""
The Newton's cradle demo application.

NewtonsCradleApp owns one of each collaborator and wires them together:

    World <- Runner (fixed-step physics)
      ^
      +-- CradleComposite (spheres + pivots)
      +-- MouseConstraint --mousedown/mouseup--> GestureAnalyzer --> Readout
    Renderer (draws world + readout)

Lifecycle:
    app = NewtonsCradleApp()
    app.setup()      # build everything, start runner and renderer
    app.run()        # interactive pygame loop (or call app.frame() yourself)
    app.teardown()   # stop and clear; safe to repeat
"""
from __future__ import annotations
import logging
import time
from typing import Callable

import pygame

from .config import CradleConfig
from .cradle import CradleComposite, cradle_from_config
from .gesture import GestureAnalyzer, Readout
from .mouse import MouseConstraint, MouseEvent
from .renderer.adapter import RendererAdapter
from .renderer.pygame_renderer import PygameRenderer
from .runner import Runner
from .world import World


class NewtonsCradleApp:
    """
    Interactive Newton's cradle.

    Attributes:
        config: Demo parameters.
        analyzer: Gesture analyzer holding the readout.
        world, runner, cradle, mouse: Collaborators, None outside setup/teardown.
        renderer: Render target (a PygameRenderer unless one is given).
    """

    def __init__(
        self,
        config: CradleConfig | None = None,
        renderer: RendererAdapter | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._logger = logging.getLogger(self.__class__.__name__)
        self.config = config or CradleConfig()
        self.renderer = renderer
        self.analyzer = GestureAnalyzer(clock=clock)
        self.world: World | None = None
        self.runner: Runner | None = None
        self.cradle: CradleComposite | None = None
        self.mouse: MouseConstraint | None = None

    @property
    def readout(self) -> Readout:
        return self.analyzer.readout

    @property
    def angle(self) -> float:
        """Last release angle in degrees."""
        return self.analyzer.angle

    @property
    def force(self) -> float:
        """Last release force in newtons."""
        return self.analyzer.force

    @property
    def active(self) -> bool:
        return self.world is not None

    def setup(self) -> None:
        """
        Create the world, renderer, runner, cradle and mouse control.

        Renderer failures (e.g. pygame.error with no display) propagate.
        """
        if self.active:
            return
        cfg = self.config

        if self.renderer is None:
            self.renderer = PygameRenderer(cfg.width, cfg.height, show_velocity=cfg.show_velocity)
        self.renderer.start()

        self.world = World(gravity=cfg.gravity, dt=cfg.dt)
        self.runner = Runner(self.world, delta=cfg.dt)
        self.runner.start()

        self.cradle = cradle_from_config(cfg)
        self.world.add_composite(self.cradle)

        self.mouse = MouseConstraint(self.world, stiffness=cfg.mouse_stiffness)
        self.mouse.on("mousedown", self._on_mousedown)
        self.mouse.on("mouseup", self._on_mouseup)

        self.renderer.look_at(cfg.viewport_min, cfg.viewport_max)
        self._logger.info("setup: %d spheres, radius %.1f", cfg.count, cfg.radius)

    def _on_mousedown(self, event: MouseEvent) -> None:
        if event.body is None:
            return
        self.analyzer.on_drag_start(event.pointer, event.body_position)

    def _on_mouseup(self, event: MouseEvent) -> None:
        self.analyzer.on_drag_end(event.pointer)

    def press(self, screen_pos) -> None:
        """Pointer down at a surface position. Ignored while inactive."""
        if not self.active:
            return
        self.mouse.press(self.renderer.to_world(screen_pos))

    def move(self, screen_pos) -> None:
        if not self.active:
            return
        self.mouse.move(self.renderer.to_world(screen_pos))

    def release(self, screen_pos) -> None:
        """Pointer up at a surface position."""
        if not self.active:
            return
        self.mouse.release(self.renderer.to_world(screen_pos))

    def frame(self, elapsed: float) -> int:
        """
        Advance physics by `elapsed` real seconds and draw one frame.

        Returns:
            Number of physics steps taken.
        """
        if not self.active:
            return 0
        steps = self.runner.tick(elapsed)
        self.renderer.render_world(self.world, overlay=self.readout.lines())
        return steps

    def run(self, fps: int = 60) -> None:
        """
        Interactive loop: pump pygame events until the window closes.

        Left mouse button drags spheres; Escape or closing the window quits.
        """
        self.setup()
        clock = pygame.time.Clock()
        try:
            while self.active:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return
                    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        return
                    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.press(event.pos)
                    elif event.type == pygame.MOUSEMOTION:
                        self.move(event.pos)
                    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                        self.release(event.pos)
                self.frame(clock.tick(fps) / 1000.0)
        finally:
            self.teardown()

    def teardown(self) -> None:
        """
        Stop rendering and stepping, clear the world, drop gesture state.

        Safe to call any number of times, including before setup().
        """
        if self.renderer is not None:
            self.renderer.stop()
        if self.runner is not None:
            self.runner.stop()
        if self.mouse is not None:
            self.mouse.detach()
        if self.world is not None:
            self.world.clear()
            self._logger.info("teardown complete")
        self.analyzer.reset()
        self.world = None
        self.runner = None
        self.cradle = None
        self.mouse = None
