import json
import pytest
from newtons_cradle.config import CradleConfig
from newtons_cradle.materials import Material
from newtons_cradle.io.json_io import config_from_json, config_to_json, load_config, save_config

def test_defaults_serialize_to_nothing():
    assert config_to_json(CradleConfig()) == {}
    assert config_from_json({}) == CradleConfig()

def test_overrides_only():
    cfg = CradleConfig(count=3, origin=(10.0, 20.0), material=Material(restitution=0.9), mouse_stiffness=0.5)
    data = config_to_json(cfg)
    assert data == {
        "origin": [10.0, 20.0],
        "count": 3,
        "mouseStiffness": 0.5,
        "material": {"friction": 0.0, "frictionAir": 0.0, "restitution": 0.9},
    }

def test_save_and_load(tmp_path):
    cfg = CradleConfig(
        count=7, radius=12.5, length=150.0, initial_offset=(-50.0, -20.0),
        gravity=(0.0, 500.0), viewport_min=(0.0, 0.0), viewport_max=(400.0, 300.0),
        show_velocity=False,
    )
    path = tmp_path / "cradle.json"
    save_config(cfg, str(path))

    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    assert raw["viewport"] == {"min": [0.0, 0.0], "max": [400.0, 300.0]}
    assert raw["showVelocity"] is False

    assert load_config(str(path)) == cfg

def test_unknown_keys_ignored():
    cfg = config_from_json({"count": 2, "colour": "red"})
    assert cfg.count == 2

@pytest.mark.parametrize("data", [
    {"origin": [1, 2, 3]},
    {"gravity": 9.81},
    {"count": 0},
    {"radius": -1},
    {"mouseStiffness": 0},
    {"material": {"restitution": 2}},
    {"viewport": {"min": [0]}},
])
def test_invalid_values(data):
    with pytest.raises(ValueError):
        config_from_json(data)

def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.json"))
