"""
Configuration management for cornerkit
"""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG = {
    "detection": {
        "method": "harris",
        "block_size": 2,
        "ksize": 3,
        "k": 0.04
    },
    "extraction": {
        "max_corners": -1,
        "quality_level": 0.01
    },
    "logging": {
        "level": "INFO",
        "log_dir": None
    }
}


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into base in place; non-dict values replace."""
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_config(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path: str = None) -> Dict[str, Any]:
    """Load a YAML config file merged over DEFAULT_CONFIG."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return config

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, "r") as fh:
        user_config = yaml.safe_load(fh) or {}
    return merge_config(config, user_config)
