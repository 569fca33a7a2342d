"""Data model for assets handed to the generator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AssetDescriptor:
    """An asset file identified by its path relative to the mod root."""

    path: str  # e.g. Textures/Npc/1_Slime.png
    pack: bool = True
