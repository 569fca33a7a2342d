"""Logic for disambiguating assets that share an accessor name.

Colliding candidates are driven toward longer, more path-qualified names.
After every change the whole group is scanned again from the top, so the
result is unique across all siblings and not only for the pair that clashed.
Members are sorted by path first, which makes the outcome independent of the
order the assets were discovered in.
"""

import logging
from collections import defaultdict

from asset_paths.diagnostic import irreducible_collision
from asset_paths.name_candidate import NameCandidate, can_increase, increase
from asset_paths.scan_assets import ScanResult

logger = logging.getLogger(__name__)


def disambiguate(
    members: list[NameCandidate], *, pre_bump: bool = True
) -> tuple[list[NameCandidate], list[NameCandidate]]:
    """Raise specificity until all members carry distinct identifiers.

    Returns the resolved members and the members that still collide after
    every directory of their paths has been folded in.
    """
    pending = sorted(members, key=lambda c: (c.path, c.order))
    if pre_bump:
        # Arriving in a group already implies a collision at the current level.
        pending = [increase(c) for c in pending]

    irreducible: list[NameCandidate] = []
    while True:
        clash: list[int] = []
        for i in range(len(pending) - 1):
            name = pending[i].identifier
            matches = [
                j for j in range(i + 1, len(pending)) if pending[j].identifier == name
            ]
            if matches:
                clash = [i, *matches]
                break

        if not clash:
            return pending, irreducible

        if any(can_increase(pending[k]) for k in clash):
            for k in clash:
                pending[k] = increase(pending[k])
        else:
            logger.debug("Irreducible collision on %r", pending[clash[0]].identifier)
            irreducible.extend(pending[k] for k in clash)
            pending = [c for k, c in enumerate(pending) if k not in clash]


def resolve_conflicts(scan: ScanResult) -> dict[str, NameCandidate]:
    """Fold every conflict group of a scan into one map of unique names.

    Groups are emptied as they are consumed. Irreducible members are dropped
    and reported through ``scan.diagnostics``. The returned map is ordered by
    encounter order.
    """
    candidates = list(scan.unique.values())
    for key, group in scan.conflicts.items():
        resolved, irreducible = disambiguate(group)
        scan.diagnostics.extend(irreducible_collision(c) for c in irreducible)
        scan.unique.pop(key, None)
        candidates.extend(resolved)
        group.clear()

    # A deeper name from one group may still equal a name from elsewhere,
    # e.g. Items/Sword.png -> Items_Sword next to Items_Sword.png.
    while True:
        by_identifier: dict[str, list[NameCandidate]] = defaultdict(list)
        for candidate in candidates:
            by_identifier[candidate.identifier].append(candidate)
        clashes = [group for group in by_identifier.values() if len(group) > 1]
        if not clashes:
            break

        clashing = {c for group in clashes for c in group}
        candidates = [c for c in candidates if c not in clashing]
        for group in clashes:
            resolved, irreducible = disambiguate(group, pre_bump=False)
            scan.diagnostics.extend(irreducible_collision(c) for c in irreducible)
            candidates.extend(resolved)

    candidates.sort(key=lambda c: c.order)
    return {c.identifier: c for c in candidates}
