"""
Open the cradle window. Drag a sphere and let go to see the release
angle and force in the top-left corner.
Run:
  python examples/interactive.py [config.json]
"""
import logging
import sys

from newtons_cradle import NewtonsCradleApp
from newtons_cradle.io import load_config

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

config = load_config(sys.argv[1]) if len(sys.argv) > 1 else None
NewtonsCradleApp(config=config).run()
