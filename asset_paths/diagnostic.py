"""Diagnostics reported for assets that cannot be given an accessor."""

from dataclasses import dataclass

from asset_paths.name_candidate import NameCandidate

INVALID_IDENTIFIER = "MB0002"
IRREDUCIBLE_COLLISION = "MB0003"


@dataclass(frozen=True)
class Diagnostic:
    """A per-asset problem; generation continues for every other asset."""

    code: str
    path: str
    identifier: str
    message: str

    def format(self) -> str:
        """Render the diagnostic as a single build-log line."""
        return f"{self.code}: {self.message} ({self.path})"


def invalid_identifier(candidate: NameCandidate) -> Diagnostic:
    """Report an identifier rejected by the character-set checks."""
    return Diagnostic(
        INVALID_IDENTIFIER,
        candidate.path,
        candidate.identifier,
        f"'{candidate.identifier}' is not a valid accessor name",
    )


def irreducible_collision(candidate: NameCandidate) -> Diagnostic:
    """Report an asset whose name still collides at full path depth."""
    return Diagnostic(
        IRREDUCIBLE_COLLISION,
        candidate.path,
        candidate.identifier,
        f"'{candidate.identifier}' collides with another asset at every "
        "directory depth",
    )
