"""Logic for turning asset descriptors into initial naming candidates."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from asset_paths.asset_descriptor import AssetDescriptor
from asset_paths.diagnostic import Diagnostic, invalid_identifier
from asset_paths.is_valid_identifier import is_valid_identifier
from asset_paths.name_candidate import NameCandidate, derive_initial

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Candidates with a unique initial name, plus groups sharing one."""

    unique: dict[str, NameCandidate] = field(default_factory=dict)
    conflicts: dict[str, list[NameCandidate]] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)


def scan_assets(descriptors: Iterable[AssetDescriptor]) -> ScanResult:
    """Derive a candidate per packed asset and group the colliding ones."""
    result = ScanResult()
    for order, descriptor in enumerate(descriptors):
        if not descriptor.pack:
            continue

        candidate = derive_initial(descriptor.path, order)
        # The stem is part of every level, so a bad stem can never be fixed.
        if not is_valid_identifier(candidate.identifier):
            logger.debug("Rejected %r for %s", candidate.identifier, candidate.path)
            result.diagnostics.append(invalid_identifier(candidate))
            continue

        key = candidate.identifier
        group = result.conflicts.get(key)
        if group is not None:
            group.append(candidate)
            continue

        existing = result.unique.pop(key, None)
        if existing is not None:
            result.conflicts[key] = [existing, candidate]
            continue

        result.unique[key] = candidate

    logger.debug(
        "Scanned %d unique names and %d conflict groups",
        len(result.unique),
        len(result.conflicts),
    )
    return result
