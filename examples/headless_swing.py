from newtons_cradle.world import World
from newtons_cradle.cradle import build_cradle
from newtons_cradle.renderer import BufferedRenderer
import numpy as np

world = World(gravity=(0.0, 1000.0))
cradle = build_cradle(280, 100, 5, 30, 200)
world.add_composite(cradle)
renderer = BufferedRenderer()

# two seconds of swinging
for _ in range(120):
    world.step()
    renderer.render_world(world)

for frame in renderer.frames[::20]:
    xs = [round(p["position"][0], 1) for p in frame["pendulums"]]
    print(f"t={frame['time']:.2f}  x={xs}")

last = cradle.pendulums[-1]
print("last sphere offset from rest:", np.round(last.position - last.rest_position, 2))
