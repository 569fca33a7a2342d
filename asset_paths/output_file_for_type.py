"""Utility for determining the output file path for a generated type."""

from pathlib import Path


def output_file_for_type(out_root: Path, type_name: str) -> Path:
    """Determine the output file for a generated type, creating its folder."""
    # ModAsset -> out_root/ModAsset.g.cs
    p = out_root / f"{type_name}.g.cs"
    p.parent.mkdir(parents=True, exist_ok=True)
    return p
