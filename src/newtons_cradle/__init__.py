# MIT License (see LICENSE)
"""
newtons_cradle - An interactive Newton's cradle on a 2D physics engine.

A row of pendulum spheres hangs from pivot constraints in a pymunk world
and is drawn in a pygame window. Dragging a sphere with the mouse and
releasing it yields a release angle and force estimate.

Main entry points:
    - NewtonsCradleApp: Wires world, runner, renderer and mouse together.
    - build_cradle: Builds the spheres and pivots.
    - GestureAnalyzer: Converts a drag into a Readout (angle, force).
    - World / Runner: Engine wrapper and fixed-timestep stepping.
    - CradleConfig: Demo parameters.

Submodules:
    - renderer: Rendering adapters (pygame, headless).
    - io: JSON configuration files.

Example:
    from newtons_cradle import NewtonsCradleApp

    NewtonsCradleApp().run()
"""
from .config import CradleConfig
from .cradle import CradleComposite, Pendulum, build_cradle, newtons_cradle
from .gesture import GestureAnalyzer, Readout
from .materials import Material
from .mouse import MouseConstraint
from .runner import Runner
from .world import World
from .app import NewtonsCradleApp

__all__ = [
    # App
    "NewtonsCradleApp",
    "CradleConfig",
    # Cradle
    "build_cradle",
    "newtons_cradle",
    "CradleComposite",
    "Pendulum",
    "Material",
    # Interaction
    "GestureAnalyzer",
    "Readout",
    "MouseConstraint",
    # Engine
    "World",
    "Runner",
]
