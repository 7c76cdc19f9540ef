import json

import pytest

import config
from water import FlowParams


def test_defaults_when_nothing_saved(config_dir):
    cfg = config.load_config()
    assert cfg["world"] == {"rows": 80, "columns": 120}
    assert cfg["physics"]["gravity"] == 0.15
    assert config.flow_params_from_config(cfg) == FlowParams()


def test_missing_path_gives_defaults(config_dir, tmp_path):
    assert config.load_config(tmp_path / "nope.json") == config._default_config()


def test_partial_file_merged(config_dir, tmp_path):
    p = tmp_path / "partial.json"
    p.write_text(json.dumps({"world": {"rows": 10, "depth": 3}, "physics": {"damping": 0.5, "spin": 1}, "junk": 1}))
    cfg = config.load_config(p)
    assert cfg["world"] == {"rows": 10, "columns": 120}
    assert cfg["physics"]["damping"] == 0.5
    assert "spin" not in cfg["physics"]
    assert "junk" not in cfg
    assert config.flow_params_from_config(cfg).damping == 0.5


def test_bad_json_raises(tmp_path):
    p = tmp_path / "bad.json"
    p.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        config.load_config(p)


def test_save_then_load_last(config_dir):
    cfg = config._default_config()
    cfg["physics"]["gravity"] = 0.3
    path = config.save_config(cfg, "My Tank!")
    assert path == config_dir / "My_Tank.json"
    assert config.get_last_config() == "My_Tank"
    assert config.list_configs() == ["My_Tank"]
    assert config.load_config()["physics"]["gravity"] == 0.3


def test_delete_clears_last(config_dir):
    config.save_config(config._default_config(), "tank")
    config.delete_config("tank")
    assert config.list_configs() == []
    assert config.get_last_config() is None
    assert config.load_config() == config._default_config()


def test_invalid_physics_rejected():
    with pytest.raises(ValueError):
        config.flow_params_from_config({"physics": {"damping": 2.0}})
