"""Load/save simulation and window settings. Settings live in configs/ as {name}.json. Grid state is never saved."""

import dataclasses
import json
import logging
import re
from pathlib import Path

from water.constants import DEFAULT_ROWS, DEFAULT_COLUMNS
from water.flow import DEFAULT_PARAMS, FlowParams

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
LAST_FILE = CONFIG_DIR / "last.txt"

PHYSICS_KEYS = tuple(f.name for f in dataclasses.fields(FlowParams))


def _sanitize_name(name: str) -> str:
    s = (name or "").strip()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"[\s-]+", "_", s).strip("_")
    return s[:64] or "unnamed"


def get_config_path(name: str) -> Path:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return CONFIG_DIR / f"{_sanitize_name(name)}.json"


def list_configs() -> list[str]:
    """Names of saved settings, sorted case-insensitively."""
    if not CONFIG_DIR.exists():
        return []
    return sorted((f.stem for f in CONFIG_DIR.glob("*.json")), key=str.lower)


def get_last_config() -> str | None:
    if not LAST_FILE.exists():
        return None
    try:
        raw = LAST_FILE.read_text().strip()
    except OSError:
        return None
    return raw or None


def set_last_config(name: str) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    LAST_FILE.write_text(_sanitize_name(name))


def load_config(path: Path | str | None = None) -> dict:
    """Settings from path, else from the last saved name, else defaults. Bad JSON raises."""
    if path is None:
        last = get_last_config()
        if last is None:
            return _default_config()
        path = get_config_path(last)
    p = Path(path)
    if not p.exists():
        return _default_config()
    with open(p, "r") as f:
        cfg = _merge_defaults(json.load(f))
    logger.info("Loaded settings from %s", p)
    return cfg


def save_config(params: dict, name: str) -> Path:
    path = get_config_path(name)
    with open(path, "w") as f:
        json.dump(_merge_defaults(params), f, indent=2)
    set_last_config(name)
    logger.info("Saved settings to %s", path)
    return path


def delete_config(name: str) -> None:
    """Remove saved settings. Clear last if this was last."""
    p = get_config_path(name)
    p.unlink(missing_ok=True)
    if get_last_config() == _sanitize_name(name):
        LAST_FILE.unlink(missing_ok=True)


def flow_params_from_config(cfg: dict) -> FlowParams:
    physics = cfg.get("physics", {})
    return FlowParams(**{k: float(physics[k]) for k in PHYSICS_KEYS if k in physics})


def _default_config() -> dict:
    return {
        "world": {"rows": DEFAULT_ROWS, "columns": DEFAULT_COLUMNS},
        "cell_size": 10,
        "line_width": 2,
        "fps": 60,
        "paused": False,
        "physics": dataclasses.asdict(DEFAULT_PARAMS),
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if "world" in data:
        d["world"] = {**d["world"], **{k: v for k, v in data["world"].items() if k in d["world"]}}
    if "physics" in data:
        d["physics"] = {**d["physics"], **{k: v for k, v in data["physics"].items() if k in PHYSICS_KEYS}}
    for k in ("cell_size", "line_width", "fps", "paused", "log_level"):
        if k in data:
            d[k] = data[k]
    return d
