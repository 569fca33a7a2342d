"""Logic for filling derived defaults into a loaded configuration."""

import logging
from typing import Any

from asset_paths.load_config import DEFAULT_CONFIG
from asset_paths.parse_bool import parse_bool

logger = logging.getLogger(__name__)


def normalize_prefix(prefix: object) -> str:
    """Return the lookup prefix, ending with '/' when non-empty."""
    text = "" if prefix is None else str(prefix)
    if text and not text.endswith("/"):
        text += "/"
    return text


def normalize_config(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve defaults that depend on other keys and coerce flag values.

    Malformed values fall back to defaults instead of failing the build.
    """
    result = dict(config)

    enabled = parse_bool(config.get("enabled", True))
    if enabled is None:
        logger.warning(
            "Invalid value %r for 'enabled', using %s",
            config.get("enabled"),
            DEFAULT_CONFIG["enabled"],
        )
        enabled = DEFAULT_CONFIG["enabled"]
    result["enabled"] = enabled

    for key in ("mod_name", "type_name"):
        if not config.get(key):
            result[key] = DEFAULT_CONFIG[key]
        else:
            result[key] = str(config[key])

    result["root_namespace"] = str(config.get("root_namespace") or result["mod_name"])
    result["namespace"] = str(config.get("namespace") or result["root_namespace"])
    result["prefix"] = normalize_prefix(config.get("prefix"))
    return result
