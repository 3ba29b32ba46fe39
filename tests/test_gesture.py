import math
import numpy as np
import pytest
from newtons_cradle.gesture import (
    GestureAnalyzer, Readout, calculate_angle, calculate_force, calculate_velocity
)

class FakeClock:
    """Wall clock the test advances by hand."""
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

def test_release_scenario():
    """Grab at (100,100), release at (100,50) one second later."""
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)

    assert analyzer.on_drag_start((110, 95), (100, 100))
    assert analyzer.dragging
    clock.now = 1.0
    readout = analyzer.on_drag_end((100, 50))

    assert not analyzer.dragging
    np.testing.assert_allclose(analyzer.last_velocity, [0, -50])
    assert readout.angle == pytest.approx(-90.0)
    assert readout.force == pytest.approx(3000.0)
    assert readout.format_angle() == "Angle: -90.00 degrees"
    assert readout.format_force() == "Force: 3000.00 N"
    assert analyzer.readout == readout

def test_pointer_start_is_not_used():
    """Velocity runs from the body position, not the pointer's start."""
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    analyzer.on_drag_start((500, 500), (100, 100))
    clock.now = 2.0
    analyzer.on_drag_end((140, 100))
    np.testing.assert_allclose(analyzer.last_velocity, [20, 0])
    assert analyzer.angle == pytest.approx(0.0)

def test_release_without_grab_is_ignored():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 1.0
    first = analyzer.on_drag_end((30, 40))
    memory = analyzer.last_velocity.copy()

    clock.now = 5.0
    again = analyzer.on_drag_end((999, 999))

    assert again == first
    assert analyzer.readout == first
    np.testing.assert_array_equal(analyzer.last_velocity, memory)

def test_fresh_analyzer_ignores_release():
    analyzer = GestureAnalyzer(clock=FakeClock())
    assert analyzer.on_drag_end((1, 1)) == Readout(0.0, 0.0)
    np.testing.assert_array_equal(analyzer.last_velocity, [0, 0])
    assert analyzer.last_timestamp is None

def test_repeated_velocity_gives_zero_force():
    """Two sessions with the same velocity: no change, no force."""
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)

    analyzer.on_drag_start((100, 50), (100, 100))
    clock.now = 1.0
    first = analyzer.on_drag_end((100, 50))

    clock.now = 2.0
    analyzer.on_drag_start((100, 50), (100, 100))
    clock.now = 3.0
    second = analyzer.on_drag_end((100, 50))

    assert first.force == pytest.approx(3000.0)
    assert second.force == pytest.approx(0.0)
    assert second.angle == pytest.approx(first.angle)

def test_force_uses_velocity_memory():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)

    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 1.0
    analyzer.on_drag_end((3, 4))       # v = (3, 4)
    clock.now = 2.0
    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 3.0
    readout = analyzer.on_drag_end((0, 0))  # v = (0, 0)

    # |dv| = 5, over 1/60 s
    assert readout.force == pytest.approx(300.0)

def test_grab_while_dragging_is_ignored():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    assert analyzer.on_drag_start((0, 0), (10, 10))
    clock.now = 0.5
    assert not analyzer.on_drag_start((0, 0), (99, 99))
    clock.now = 1.0
    analyzer.on_drag_end((10, 0))
    # start position and time come from the first grab
    np.testing.assert_allclose(analyzer.last_velocity, [0, -10])

def test_clock_not_advancing_falls_back_to_frame_time():
    clock = FakeClock(7.0)
    analyzer = GestureAnalyzer(clock=clock)
    analyzer.on_drag_start((0, 0), (0, 0))
    analyzer.on_drag_end((1, 0))
    np.testing.assert_allclose(analyzer.last_velocity, [60, 0])

def test_missing_timestamp_falls_back_to_frame_time():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    analyzer.on_drag_start((0, 0), (0, 0))
    analyzer.last_timestamp = None
    clock.now = 5.0
    analyzer.on_drag_end((2, 0))
    np.testing.assert_allclose(analyzer.last_velocity, [120, 0])
    assert analyzer.last_timestamp == 5.0

def test_body_position_is_copied():
    """The grab position is a snapshot, not a live reference."""
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    position = np.array([100.0, 100.0])
    analyzer.on_drag_start((0, 0), position)
    position[:] = (0.0, 0.0)
    clock.now = 1.0
    analyzer.on_drag_end((100, 50))
    np.testing.assert_allclose(analyzer.last_velocity, [0, -50])

def test_subscribers_receive_readout():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    seen = []
    callback = analyzer.subscribe(seen.append)

    analyzer.on_drag_end((0, 0))
    assert seen == []

    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 1.0
    readout = analyzer.on_drag_end((0, 10))
    assert seen == [readout]

    analyzer.unsubscribe(callback)
    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 2.0
    analyzer.on_drag_end((0, 10))
    assert len(seen) == 1

def test_instances_do_not_share_memory():
    clock = FakeClock(0.0)
    a = GestureAnalyzer(clock=clock)
    b = GestureAnalyzer(clock=clock)
    a.on_drag_start((0, 0), (0, 0))
    clock.now = 1.0
    a.on_drag_end((10, 0))
    np.testing.assert_array_equal(b.last_velocity, [0, 0])
    assert b.readout == Readout()

def test_reset():
    clock = FakeClock(0.0)
    analyzer = GestureAnalyzer(clock=clock)
    analyzer.on_drag_start((0, 0), (0, 0))
    clock.now = 1.0
    analyzer.on_drag_end((10, 0))
    analyzer.on_drag_start((0, 0), (0, 0))

    analyzer.reset()
    assert not analyzer.dragging
    assert analyzer.readout == Readout()
    assert analyzer.last_timestamp is None
    np.testing.assert_array_equal(analyzer.last_velocity, [0, 0])

@pytest.mark.parametrize("v", [(1, 0), (0, 1), (-3, 4), (-2, -0.5), (7, -7)])
@pytest.mark.parametrize("k", [0.001, 0.5, 1.0, 60.0, 1e6])
def test_angle_scale_invariant(v, k):
    v = np.array(v, dtype=np.float64)
    assert calculate_angle(k * v) == pytest.approx(calculate_angle(v))

def test_angle_range():
    assert calculate_angle((1, 0)) == pytest.approx(0.0)
    assert calculate_angle((0, 1)) == pytest.approx(90.0)
    assert calculate_angle((0, -1)) == pytest.approx(-90.0)
    assert calculate_angle((-1, 0)) == pytest.approx(180.0)
    # -180 folds onto +180
    assert calculate_angle((-1, -0.0)) == pytest.approx(180.0)
    assert calculate_angle((1, 1)) == pytest.approx(math.degrees(math.pi / 4))

def test_velocity_and_force_helpers():
    np.testing.assert_allclose(calculate_velocity((1, 1), (3, 5), 0.5), [4, 8])
    assert calculate_force((3, 4), (0, 0), timestep=1.0) == pytest.approx(5.0)
    assert calculate_force((3, 4), (0, 0), timestep=1.0, mass=2.0) == pytest.approx(10.0)
    assert calculate_force((3, 4), (3, 4)) == 0.0

def test_invalid_timesteps():
    with pytest.raises(ValueError):
        GestureAnalyzer(sample_dt=0)
    with pytest.raises(ValueError):
        GestureAnalyzer(force_timestep=-1)
