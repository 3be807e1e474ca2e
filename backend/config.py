# backend/config.py

import logging
import os
from typing import Any, Dict

import yaml

from .levels import get_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join("config", "settings.yaml")

DEFAULTS: Dict[str, Any] = {
    "host": "0.0.0.0",
    "port": 5000,
    "debug": False,
    "default_level": 2,
    "seed": None,
    "log_level": "INFO",
}


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Read settings from a YAML file, filling in DEFAULTS for anything missing.

    A missing file is not an error; the defaults are used as-is.
    """
    config = dict(DEFAULTS)
    if path and os.path.exists(path):
        with open(path, "r") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Could not parse config file {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        config.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    else:
        logger.debug("No config file at %s, using defaults", path)

    # default_level must name one of the presets
    get_level(config["default_level"])
    return config
