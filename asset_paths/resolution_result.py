"""Data models for the outcome of resolving asset accessor names."""

from dataclasses import dataclass, field

from asset_paths.diagnostic import Diagnostic


@dataclass(frozen=True)
class AccessorSpec:
    """One accessor to emit: a member name bound to an asset lookup path."""

    name: str
    path: str  # prefix + source_path, as requested at runtime
    source_path: str
    level: int


@dataclass
class ResolutionResult:
    """Accessors in emission order plus the diagnostics of rejected assets."""

    accessors: list[AccessorSpec] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
