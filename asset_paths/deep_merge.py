"""Logic for layering a user configuration over the defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``.

    Nested mappings are merged key by key; any other value in ``update``,
    lists included, replaces the default outright. A user listing
    ``discovery.extensions: [.png]`` therefore scans only ``.png`` files.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged
