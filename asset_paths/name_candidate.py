"""Naming candidates for asset paths and their specificity levels.

A candidate's identifier is always a pure function of its path and level: the
level counts how many parent directory names are folded in front of the
filename stem. ``Items/Boss/Sword.png`` gives ``Sword`` at level 0,
``Boss_Sword`` at level 1 and ``Items_Boss_Sword`` at level 2.
"""

from dataclasses import dataclass, replace

from asset_paths.is_valid_identifier import starts_with_digit
from asset_paths.path_segments import filename_stem, name_segments


@dataclass(frozen=True)
class NameCandidate:
    """A proposed accessor identifier for one asset path."""

    path: str
    identifier: str
    level: int = 0
    order: int = 0  # encounter index, only used for emission order


def max_level(path: str) -> int:
    """Return the highest level the path supports (its directory depth)."""
    return max(len(name_segments(path)) - 1, 0)


def derive_identifier(path: str, level: int) -> str:
    """Join the stem and its ``level`` closest directory names with underscores."""
    segments = name_segments(path)
    if not segments:
        return ""
    level = min(max(level, 0), len(segments) - 1)
    return "_".join(segments[-(level + 1) :])


def _past_digit_led(path: str, level: int) -> int:
    """Return the first level at or above ``level`` not led by a digit.

    Stops at the path root, so a path named by digits all the way up keeps
    its deepest name and is rejected at emission.
    """
    top = max_level(path)
    while level < top and starts_with_digit(derive_identifier(path, level)):
        level += 1
    return level


def derive_initial(path: str, order: int = 0) -> NameCandidate:
    """Create the starting candidate for a path.

    A stem starting with a digit is never a legal identifier on its own, so it
    is qualified with its parent directory up front, and with further
    directories while the name still starts with a digit (A/2024/1.png gives
    A_2024_1).
    """
    level = 0
    if starts_with_digit(filename_stem(path)):
        level = _past_digit_led(path, min(1, max_level(path)))
    return NameCandidate(path, derive_identifier(path, level), level, order)


def can_increase(candidate: NameCandidate) -> bool:
    """Return True if the candidate still has unused parent directories."""
    return candidate.level < max_level(candidate.path)


def increase(candidate: NameCandidate) -> NameCandidate:
    """Return the candidate at the next level that is not digit-led.

    Usually one level up; a digit-led directory such as ``3D`` is skipped
    over. An exhausted candidate (all directories already folded in) is
    returned unchanged.
    """
    if not can_increase(candidate):
        return candidate
    level = _past_digit_led(candidate.path, candidate.level + 1)
    return replace(
        candidate, level=level, identifier=derive_identifier(candidate.path, level)
    )
