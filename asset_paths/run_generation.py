"""Orchestration logic for generating the asset accessor class."""

import argparse
import logging
from pathlib import Path
from typing import Any

from asset_paths.asset_descriptor import AssetDescriptor
from asset_paths.compute_config_hash import compute_config_hash
from asset_paths.discover_assets import discover_assets
from asset_paths.generation_report import GenerationReport
from asset_paths.load_asset_manifest import ManifestError, load_asset_manifest
from asset_paths.load_config import load_config
from asset_paths.normalize_config import normalize_config
from asset_paths.output_file_for_type import output_file_for_type
from asset_paths.render_accessor_class import render_accessor_class
from asset_paths.resolve_asset_paths import resolve

logger = logging.getLogger(__name__)

CLI_OVERRIDES = ("mod_name", "type_name", "namespace", "prefix")


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    config = _init_config(args)
    if not config["enabled"]:
        print("Asset path generation is disabled; nothing to do.")
        return 0

    descriptors = _load_descriptors(args.source, config)
    result = resolve(descriptors, config)
    for diagnostic in result.diagnostics:
        logger.warning("%s", diagnostic.format())

    source = render_accessor_class(
        result.accessors,
        type_name=config["type_name"],
        namespace=config["namespace"],
        mod_name=config["mod_name"],
    )

    if args.report:
        report = GenerationReport(compute_config_hash(config), config["type_name"])
        report.add_result(result)
        report.generate_report(str(args.report))

    if args.dry_run:
        print(
            f"Dry run complete: {len(result.accessors)} accessors, "
            f"{len(result.diagnostics)} diagnostics"
        )
    else:
        out_file = output_file_for_type(args.out_dir.resolve(), config["type_name"])
        out_file.write_text(source, encoding="utf-8")
        print(f"Generated {len(result.accessors)} asset accessors into: {out_file}")

    if args.strict and result.diagnostics:
        return 1
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command line overrides."""
    config = load_config(args.config)
    for key in CLI_OVERRIDES:
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    return normalize_config(config)


def _load_descriptors(source: Path, config: dict[str, Any]) -> list[AssetDescriptor]:
    """Read descriptors from a manifest file or a content directory."""
    if source.is_dir():
        discovery = config.get("discovery", {})
        descriptors = discover_assets(
            source,
            extensions=discovery.get("extensions", []),
            exclude=discovery.get("exclude", []),
        )
    elif source.is_file():
        try:
            descriptors = load_asset_manifest(source)
        except ManifestError as exc:
            raise SystemExit(str(exc)) from exc
    else:
        msg = f"Asset source not found: {source}"
        raise SystemExit(msg)

    logger.info("Loaded %d asset descriptors from %s", len(descriptors), source)
    return descriptors
