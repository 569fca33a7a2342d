"""Logic for loading and merging generator configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from asset_paths.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "enabled": True,
    "mod_name": "Mod",
    "root_namespace": None,  # defaults to mod_name
    "type_name": "ModAsset",
    "namespace": None,  # defaults to root_namespace
    "prefix": "",
    "discovery": {
        "extensions": [
            ".fx",
            ".mp3",
            ".ogg",
            ".png",
            ".rawimg",
            ".wav",
            ".xnb",
        ],
        "exclude": [],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError:
                logger.exception("Error parsing config %s, using defaults", p)
                return config
            if isinstance(user_config, dict):
                config = deep_merge(config, user_config)
            else:
                logger.warning("Ignoring config %s: top level is not a mapping", p)
        else:
            logger.warning("Config file %s not found, using defaults", p)
    return config
