"""Global app configuration (stream tuning, refinement)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "stream": {
        "cooldown": 5,
        "max_chain_depth": 3,
        "response_window": 3,
        "default_count": 20,
    },
    "refinement": {
        "model": "",
    },
}


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = json.loads(json.dumps(_CONFIG_DEFAULTS))
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        for group, vals in stored.items():
            if group in config and isinstance(vals, dict):
                config[group].update(vals)
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config.

    Groups are merged key-by-key; unknown groups are ignored.
    """
    config = get_config()
    for group, vals in fields.items():
        if group in config and isinstance(vals, dict):
            config[group].update(vals)
    _config_path().write_text(json.dumps(config, indent=2))
    return config


def stream_settings() -> dict[str, Any]:
    return get_config()["stream"]
