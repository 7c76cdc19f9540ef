import json

import pytest

import app
import config


@pytest.mark.parametrize("physics", [{"damping": 2.0}, {"gravity": "fast"}, {"flow_rate": [0.1]}])
def test_invalid_physics_falls_back_to_defaults(tmp_path, physics):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps({"physics": physics, "fps": 30}))
    assert app._load_settings(p) == config._default_config()


def test_unreadable_settings_fall_back_to_defaults(tmp_path):
    p = tmp_path / "broken.json"
    p.write_text("{not json")
    assert app._load_settings(p) == config._default_config()


def test_valid_settings_kept(tmp_path):
    p = tmp_path / "tank.json"
    p.write_text(json.dumps({"physics": {"damping": 0.5}, "fps": 30}))
    cfg = app._load_settings(p)
    assert cfg["fps"] == 30
    assert cfg["physics"]["damping"] == 0.5


def test_save_name_follows_loaded_file(config_dir, tmp_path):
    config.save_config(config._default_config(), "other")
    assert app._save_name(tmp_path / "tank.json") == "tank"
    assert app._save_name(None) == "other"


def test_save_name_default(config_dir):
    assert app._save_name(None) == "default"
