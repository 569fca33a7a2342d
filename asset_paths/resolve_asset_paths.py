"""Resolve asset descriptors into uniquely named accessor specifications."""

import logging
from collections.abc import Iterable
from typing import Any

from asset_paths.asset_descriptor import AssetDescriptor
from asset_paths.conflict_resolver import resolve_conflicts
from asset_paths.diagnostic import invalid_identifier
from asset_paths.is_valid_identifier import is_emittable_identifier
from asset_paths.normalize_config import normalize_config
from asset_paths.render_accessor_class import REPOSITORY_FIELD
from asset_paths.resolution_result import AccessorSpec, ResolutionResult
from asset_paths.scan_assets import scan_assets

logger = logging.getLogger(__name__)


def resolve(
    descriptors: Iterable[AssetDescriptor], config: dict[str, Any]
) -> ResolutionResult:
    """Assign every packed asset a unique accessor name.

    Assets that cannot be named are left out and reported; they never abort
    the run. A disabled configuration yields an empty result.
    """
    settings = normalize_config(config)
    if not settings["enabled"]:
        logger.info("Asset path generation is disabled")
        return ResolutionResult()

    scan = scan_assets(descriptors)
    resolved = resolve_conflicts(scan)

    # Member names the generated class already uses for itself.
    reserved = {settings["type_name"], REPOSITORY_FIELD}

    result = ResolutionResult(diagnostics=scan.diagnostics)
    for identifier, candidate in resolved.items():
        # Disambiguation can still end on a keyword or otherwise bad name.
        if not is_emittable_identifier(identifier, reserved):
            result.diagnostics.append(invalid_identifier(candidate))
            continue
        # Path segments never carry separators, so the name is used as-is.
        result.accessors.append(
            AccessorSpec(
                name=identifier,
                path=settings["prefix"] + candidate.path,
                source_path=candidate.path,
                level=candidate.level,
            )
        )

    logger.info(
        "Resolved %d accessors with %d diagnostics",
        len(result.accessors),
        len(result.diagnostics),
    )
    return result
