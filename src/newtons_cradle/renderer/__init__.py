# MIT License (see LICENSE)
"""
Rendering adapters for the cradle demo.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - PygameRenderer: The interactive 800x600 window.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for tests or export.
    - Viewport / fit_viewport: World-to-surface framing.

The headless renderers draw nothing and need no display, so tests and
recording run without a window. pygame is still imported with this
package.

Typical usage:
    from newtons_cradle.renderer import BufferedRenderer

    renderer = BufferedRenderer()
    renderer.render_world(world)
"""
from .adapter import (
    RendererAdapter,
    NullRenderer,
    BufferedRenderer,
    Viewport,
    fit_viewport,
)
from .pygame_renderer import PygameRenderer

__all__ = [
    "RendererAdapter",
    "PygameRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "Viewport",
    "fit_viewport",
]
