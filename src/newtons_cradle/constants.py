# MIT License (see LICENSE)
"""
Constants shared by the cradle builder, gesture analyzer and app.

Units are screen units: pixels for lengths, seconds for time.
The y axis points down, matching the window coordinate system.
"""
from __future__ import annotations

# Horizontal spacing between neighbouring spheres, as a multiple of radius.
# Slightly below 2 so resting spheres touch and transfer momentum.
SEPARATION: float = 1.9

# Contact slop handed to the engine, as a fraction of the sphere radius.
SLOP_RATIO: float = 0.02

# Displacement of sphere 0 after construction; starts the swing.
INITIAL_OFFSET: tuple[float, float] = (-180.0, -100.0)

# Fallback velocity sampling interval when no timestamp is available (60 fps).
DEFAULT_SAMPLE_DT: float = 1 / 60

# Fixed per-sample timestep for the finite-difference force estimate.
# Kept separate from DEFAULT_SAMPLE_DT on purpose; see GestureAnalyzer.
FORCE_TIMESTEP: float = 1 / 60

# Every sphere is treated as unit mass when estimating force.
BALL_MASS: float = 1.0

# Physics step of the fixed-timestep runner.
STEP_DT: float = 1 / 60

# Render surface size in logical units.
CANVAS_SIZE: tuple[int, int] = (800, 600)
