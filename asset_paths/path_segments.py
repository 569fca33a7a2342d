"""Utilities for splitting logical asset paths into name segments."""

import re
from pathlib import PurePosixPath

# Mod paths come from both Windows and POSIX build hosts.
SEPARATOR_RE = re.compile(r"[\\/]+")


def split_path(path: str) -> list[str]:
    """Split a logical asset path into its non-empty segments."""
    return [s for s in SEPARATOR_RE.split(path) if s and s != "."]


def filename_stem(path: str) -> str:
    """Return the file name of a path without its final extension."""
    segments = split_path(path)
    if not segments:
        return ""
    # Textures/a.b.png -> a.b
    return PurePosixPath(segments[-1]).stem


def name_segments(path: str) -> list[str]:
    """Return the directory names of a path followed by its filename stem."""
    segments = split_path(path)
    if not segments:
        return []
    return [*segments[:-1], filename_stem(path)]
