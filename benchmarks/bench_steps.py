"""
Microbenchmark: time per step vs number of spheres.
Run:
  python benchmarks/bench_steps.py
"""
import time
from newtons_cradle.world import World
from newtons_cradle.cradle import build_cradle

def run(n: int, steps: int = 600):
    world = World(gravity=(0.0, 1000.0), dt=1/60)
    world.add_composite(build_cradle(50, 100, n, 10, 200))

    # warmup
    for _ in range(30):
        world.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step()
    t1 = time.perf_counter()

    return (t1 - t0) / steps

if __name__ == "__main__":
    for n in [5, 10, 25, 50]:
        per_step = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
