import numpy as np
import pytest
from newtons_cradle.world import World
from newtons_cradle.cradle import newtons_cradle
from newtons_cradle.mouse import MouseConstraint

def make_world():
    world = World(gravity=(0, 0))
    cradle = newtons_cradle(100, 0, 1, 30, 200)
    world.add_composite(cradle)
    return world, cradle

def record(mouse):
    events = []
    for name in MouseConstraint.EVENTS:
        mouse.on(name, events.append)
    return events

def test_press_grabs_body():
    world, cradle = make_world()
    mouse = MouseConstraint(world, stiffness=0.2)
    events = record(mouse)

    body = mouse.press((110, 205))

    assert body is cradle.pendulums[0].body
    assert mouse.dragging
    assert mouse.joint in world.constraints
    assert len(events) == 1
    assert events[0].name == "mousedown"
    assert events[0].body is body
    np.testing.assert_allclose(events[0].pointer, [110, 205])
    np.testing.assert_allclose(events[0].body_position, [100, 200])

def test_press_on_empty_space():
    world, _ = make_world()
    mouse = MouseConstraint(world)
    events = record(mouse)

    assert mouse.press((500, 500)) is None
    assert not mouse.dragging
    assert events[0].name == "mousedown"
    assert events[0].body is None
    assert events[0].body_position is None
    assert len(world.constraints) == 1  # only the pivot

def test_release_drops_body():
    world, cradle = make_world()
    mouse = MouseConstraint(world)
    events = record(mouse)

    mouse.press((100, 200))
    joint = mouse.joint
    mouse.release((120, 180))

    assert not mouse.dragging
    assert joint not in world.constraints
    assert events[-1].name == "mouseup"
    assert events[-1].body is cradle.pendulums[0].body
    np.testing.assert_allclose(events[-1].pointer, [120, 180])

def test_release_without_press():
    world, _ = make_world()
    mouse = MouseConstraint(world)
    events = record(mouse)
    mouse.release((0, 0))
    assert events[0].name == "mouseup"
    assert events[0].body is None

def test_drag_moves_body():
    """The held sphere follows the pointer to the right."""
    world, cradle = make_world()
    mouse = MouseConstraint(world, stiffness=0.2)

    mouse.press((100, 200))
    mouse.move((160, 200))
    for _ in range(30):
        world.step()

    assert cradle.pendulums[0].position[0] > 110

def test_stiffness_to_error_bias():
    world, _ = make_world()
    assert MouseConstraint(world, stiffness=1.0).error_bias == 0.0
    assert MouseConstraint(world, stiffness=0.2).error_bias == pytest.approx(0.8 ** 60)
    with pytest.raises(ValueError):
        MouseConstraint(world, stiffness=0.0)
    with pytest.raises(ValueError):
        MouseConstraint(world, stiffness=1.5)

def test_unknown_event():
    world, _ = make_world()
    with pytest.raises(ValueError):
        MouseConstraint(world).on("click", print)

def test_detach():
    world, _ = make_world()
    mouse = MouseConstraint(world)
    events = record(mouse)
    mouse.press((100, 200))

    mouse.detach()
    mouse.detach()

    assert not mouse.dragging
    assert len(world.constraints) == 1
    mouse.release((0, 0))
    assert len(events) == 1  # listeners are gone
