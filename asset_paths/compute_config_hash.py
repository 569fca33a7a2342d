"""Fingerprint the settings that shape a generated accessor class."""

import hashlib
import json
from typing import Any

# Discovery and logging settings only decide which assets are seen; the
# resolved accessors themselves are recorded in the report.
OUTPUT_KEYS = ("enabled", "mod_name", "namespace", "prefix", "root_namespace",
               "type_name")  # fmt: skip


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a hex digest over the output-shaping keys of ``config``.

    Keys are read from the normalized configuration; missing keys hash as
    absent, so key order and unrelated sections never change the stamp.
    """
    fingerprint = {key: config[key] for key in OUTPUT_KEYS if key in config}
    payload = json.dumps(fingerprint, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
