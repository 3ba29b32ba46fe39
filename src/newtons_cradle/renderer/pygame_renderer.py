# MIT License (see LICENSE)
"""
pygame window renderer.

Draws each sphere as a filled circle hanging from a line to its anchor,
optionally with its velocity vector, and the readout as text in the
top-left corner. The window is the 800x600 surface; world coordinates
go through the viewport set by look_at().
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

import pygame

from ..constants import CANVAS_SIZE
from .adapter import RendererAdapter

if TYPE_CHECKING:
    from ..cradle import Pendulum

BACKGROUND = (20, 21, 26)
ARM = (150, 150, 160)
SPHERE = (200, 205, 220)
VELOCITY = (255, 170, 60)
TEXT = (235, 235, 235)

# Velocity vectors are drawn as the distance travelled in this many seconds.
VELOCITY_SCALE = 0.05


class PygameRenderer(RendererAdapter):
    """
    Renders the cradle into a pygame display window.

    Attributes:
        surface: The display surface, None until start().
        show_velocity: Draw velocity vectors on spheres.
        caption: Window title.
    """

    def __init__(
        self,
        width: int = CANVAS_SIZE[0],
        height: int = CANVAS_SIZE[1],
        show_velocity: bool = True,
        caption: str = "Newton's Cradle",
    ):
        self.width = width
        self.height = height
        self.show_velocity = show_velocity
        self.caption = caption
        self.surface: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def start(self) -> None:
        """
        Open the window.

        Raises:
            pygame.error: If no display is available.
        """
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(self.caption)
        self._font = pygame.font.Font(None, 24)
        self.running = True

    def stop(self) -> None:
        """Close the window. Safe to call repeatedly."""
        if self.running:
            pygame.display.quit()
        self.surface = None
        self._font = None
        self.running = False

    def _to_screen(self, point) -> tuple[int, int]:
        p = self.viewport.world_to_screen(point) if self.viewport is not None else point
        return int(round(p[0])), int(round(p[1]))

    def _scale(self) -> float:
        return self.viewport.scale if self.viewport is not None else 1.0

    def begin_frame(self, time: float) -> None:
        if self.surface is not None:
            self.surface.fill(BACKGROUND)

    def draw_pendulum(self, pendulum: "Pendulum") -> None:
        if self.surface is None:
            return
        anchor = self._to_screen(pendulum.anchor)
        centre = self._to_screen(pendulum.position)
        radius = max(1, int(round(pendulum.radius * self._scale())))

        pygame.draw.line(self.surface, ARM, anchor, centre, 2)
        pygame.draw.circle(self.surface, SPHERE, centre, radius)

        if self.show_velocity:
            tip = self._to_screen(pendulum.position + pendulum.velocity * VELOCITY_SCALE)
            if tip != centre:
                pygame.draw.line(self.surface, VELOCITY, centre, tip, 2)

    def draw_overlay(self, lines: Sequence[str]) -> None:
        if self.surface is None or self._font is None:
            return
        y = 10
        for line in lines:
            text = self._font.render(line, True, TEXT)
            self.surface.blit(text, (10, y))
            y += text.get_height() + 4

    def end_frame(self) -> None:
        if self.surface is not None:
            pygame.display.flip()
