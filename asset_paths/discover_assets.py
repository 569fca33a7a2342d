"""Discover packable assets by walking a mod content directory."""

from collections.abc import Iterable
from fnmatch import fnmatch
from pathlib import Path

from asset_paths.asset_descriptor import AssetDescriptor


def discover_assets(
    root: Path,
    extensions: Iterable[str] = (),
    exclude: Iterable[str] = (),
) -> list[AssetDescriptor]:
    """List files under root as descriptors with root-relative POSIX paths.

    Files are visited in sorted order so repeated runs see the same sequence.
    An empty ``extensions`` accepts every file.
    """
    wanted = {ext.lower() for ext in extensions}
    patterns = list(exclude)
    descriptors = []
    for p in sorted(root.rglob("*")):
        if not p.is_file():
            continue
        rel = p.relative_to(root).as_posix()
        if wanted and p.suffix.lower() not in wanted:
            continue
        if any(fnmatch(rel, pattern) for pattern in patterns):
            continue
        descriptors.append(AssetDescriptor(rel))
    return descriptors
