"""Generate a C# class exposing one named accessor per mod asset.

Asset paths are turned into unique identifiers (``Textures/Npc/Slime.png``
becomes ``Slime``, or ``Npc_Slime`` when another ``Slime`` exists) and written
to ``<out_dir>/<TypeName>.g.cs``.
"""

import argparse
import logging
from pathlib import Path

from asset_paths.run_generation import run_generation


def main() -> int:
    """Run the generator from the command line."""
    ap = argparse.ArgumentParser(
        description="Generate named C# accessors for mod asset files.",
    )
    ap.add_argument(
        "source",
        type=Path,
        help="Asset manifest (YAML) or mod content directory to scan",
    )
    ap.add_argument(
        "out_dir",
        type=Path,
        help="Directory receiving the generated <TypeName>.g.cs file",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--mod-name",
        dest="mod_name",
        help="Mod whose asset repository the accessors read from",
    )
    ap.add_argument(
        "--type-name",
        dest="type_name",
        help="Name of the generated class (default: ModAsset)",
    )
    ap.add_argument(
        "--namespace",
        help="Namespace of the generated class (default: root namespace)",
    )
    ap.add_argument(
        "--prefix",
        help="Path prefix prepended to every asset lookup",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON report of accessors and diagnostics",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve names without writing the generated file",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any asset was rejected",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log resolution details",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
