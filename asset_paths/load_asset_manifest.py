"""Load asset descriptors from a YAML asset manifest.

The manifest lists the build items of a mod, either as bare paths or as maps
carrying ``path`` (or ``mod_path``) and an optional ``pack`` flag::

    assets:
      - Textures/Npc/1_Slime.png
      - path: Sounds/Hit.ogg
        pack: false
"""

import logging
from pathlib import Path

import yaml

from asset_paths.asset_descriptor import AssetDescriptor
from asset_paths.parse_bool import parse_bool

logger = logging.getLogger(__name__)


class ManifestError(ValueError):
    """Raised when an asset manifest cannot be read."""


def load_asset_manifest(path: Path) -> list[AssetDescriptor]:
    """Parse a manifest file into descriptors, in manifest order."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Cannot read asset manifest {path}: {exc}"
        raise ManifestError(msg) from exc
    except yaml.YAMLError as exc:
        msg = f"Malformed asset manifest {path}: {exc}"
        raise ManifestError(msg) from exc

    if doc is None:
        return []
    items = doc.get("assets") if isinstance(doc, dict) else doc
    if items is None:
        return []
    if not isinstance(items, list):
        msg = f"Asset manifest {path} must contain a list of assets"
        raise ManifestError(msg)

    descriptors = []
    for item in items:
        if isinstance(item, str):
            descriptors.append(AssetDescriptor(item))
            continue
        if not isinstance(item, dict):
            logger.warning("Skipping manifest entry %r", item)
            continue

        mod_path = item.get("path", item.get("mod_path"))
        if not mod_path:
            logger.warning("Skipping manifest entry without a path: %r", item)
            continue
        # Anything that is not a recognisable boolean means "do not pack".
        pack = parse_bool(item.get("pack", True))
        descriptors.append(AssetDescriptor(str(mod_path), pack=bool(pack)))
    return descriptors
