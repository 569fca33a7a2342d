"""Tests for resolving descriptors into accessor specifications."""

import itertools
import re

import pytest

from asset_paths.asset_descriptor import AssetDescriptor
from asset_paths.diagnostic import INVALID_IDENTIFIER
from asset_paths.resolve_asset_paths import resolve

EMITTED_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

ADVERSARIAL_PATHS = [
    "Items/Sword.png",
    "Items/Boss/Sword.png",
    "Boss/Sword.png",
    "Misc/Items_Sword.png",
    "Items_Sword.png",
    "A/B/X.png",
    "A/C/X.png",
    "D/B/X.png",
    "B/X.png",
    "Textures/1_Slime.png",
    "Npc/Textures/1_Slime.png",
    "Textures\\Npc\\Slime.png",
    "Slime.png",
]


def names(paths: list[str], config: dict | None = None) -> dict[str, str]:
    """Resolve the paths and return a source path -> accessor name mapping."""
    result = resolve([AssetDescriptor(p) for p in paths], config or {})
    return {a.source_path: a.name for a in result.accessors}


def test_single_asset() -> None:
    """Verify that a lone asset is named after its stem."""
    result = resolve([AssetDescriptor("Items/Sword.png")], {})
    assert len(result.accessors) == 1
    accessor = result.accessors[0]
    assert accessor.name == "Sword"
    assert accessor.path == "Items/Sword.png"


def test_collision_qualifies_both_assets() -> None:
    """Verify that two equal stems are both qualified by their directory."""
    assert names(["Items/Sword.png", "Items/Boss/Sword.png"]) == {
        "Items/Sword.png": "Items_Sword",
        "Items/Boss/Sword.png": "Boss_Sword",
    }


def test_three_way_collision() -> None:
    """Verify that three equal stems resolve in one round."""
    assert names(["A/X.png", "B/X.png", "C/X.png"]) == {
        "A/X.png": "A_X",
        "B/X.png": "B_X",
        "C/X.png": "C_X",
    }


def test_digit_stem_is_directory_qualified() -> None:
    """Verify that a digit-led stem never appears bare."""
    assert names(["Textures/1_Slime.png"]) == {
        "Textures/1_Slime.png": "Textures_1_Slime"
    }


def test_invalid_name_is_excluded() -> None:
    """Verify that a bad name is reported while the run still succeeds."""
    result = resolve([AssetDescriptor("Bad Name.png")], {})
    assert result.accessors == []
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].code == INVALID_IDENTIFIER
    assert result.diagnostics[0].path == "Bad Name.png"


def test_multi_pass_collision_is_unique() -> None:
    """Verify that partially overlapping paths end with distinct names."""
    resolved = names(["A/B/X.png", "A/C/X.png", "D/B/X.png"])
    assert len(resolved) == 3  # noqa: PLR2004
    assert len(set(resolved.values())) == 3  # noqa: PLR2004


def test_top_level_digit_stem_is_rejected() -> None:
    """Verify that a digit-led stem with no parent directory is reported."""
    result = resolve([AssetDescriptor("1_Slime.png")], {})
    assert result.accessors == []
    assert [d.code for d in result.diagnostics] == [INVALID_IDENTIFIER]


def test_digit_led_directory_is_skipped() -> None:
    """Verify that qualification continues past a digit-led directory."""
    result = resolve([AssetDescriptor("A/2024/1.png")], {})
    assert [a.name for a in result.accessors] == ["A_2024_1"]
    assert result.diagnostics == []


@pytest.mark.parametrize("path", ["Items/class.png", "Items/ModAsset.png", "_repo.png"])
def test_names_taken_in_generated_class_are_rejected(path: str) -> None:
    """Verify that keywords and the class's own member names are reported."""
    result = resolve([AssetDescriptor(path)], {})
    assert result.accessors == []
    assert [(d.code, d.path) for d in result.diagnostics] == [
        (INVALID_IDENTIFIER, path)
    ]


def test_custom_type_name_is_reserved() -> None:
    """Verify that the configured class name is the one held back."""
    resolved = names(["Items/ModAsset.png", "Assets.png"], {"type_name": "Assets"})
    assert resolved == {"Items/ModAsset.png": "ModAsset"}


def test_names_are_unique_and_valid() -> None:
    """Verify uniqueness and validity on a set of colliding paths."""
    result = resolve([AssetDescriptor(p) for p in ADVERSARIAL_PATHS], {})
    emitted = [a.name for a in result.accessors]
    assert len(emitted) == len(set(emitted))
    for name in emitted:
        assert EMITTED_NAME_RE.fullmatch(name)
    assert len(result.accessors) + len(result.diagnostics) == len(ADVERSARIAL_PATHS)


def test_names_do_not_depend_on_input_order() -> None:
    """Verify that every ordering of the input yields the same names."""
    paths = ["Items/Sword.png", "Boss/Sword.png", "Misc/Items_Sword.png", "B/X.png"]
    expected = names(paths)
    for permutation in itertools.permutations(paths):
        assert names(list(permutation)) == expected


def test_shuffled_adversarial_input_is_deterministic() -> None:
    """Verify determinism on a larger set using a few fixed orderings."""
    expected = names(ADVERSARIAL_PATHS)
    assert names(list(reversed(ADVERSARIAL_PATHS))) == expected
    assert names(sorted(ADVERSARIAL_PATHS)) == expected
    assert names(ADVERSARIAL_PATHS[1::2] + ADVERSARIAL_PATHS[::2]) == expected


def test_emission_follows_encounter_order() -> None:
    """Verify that accessors keep the order the assets were listed in."""
    result = resolve(
        [AssetDescriptor(p) for p in ("B/X.png", "Z.png", "A/X.png")], {}
    )
    assert [a.name for a in result.accessors] == ["B_X", "Z", "A_X"]


@pytest.mark.parametrize(
    ("prefix", "expected"),
    [
        ("", "Items/Sword.png"),
        ("Assets", "Assets/Items/Sword.png"),
        ("Assets/", "Assets/Items/Sword.png"),
    ],
)
def test_prefix_is_prepended(prefix: str, expected: str) -> None:
    """Verify that the configured prefix ends with exactly one separator."""
    result = resolve([AssetDescriptor("Items/Sword.png")], {"prefix": prefix})
    assert result.accessors[0].path == expected


def test_backslash_path_is_preserved() -> None:
    """Verify that the lookup path keeps the original separators."""
    result = resolve([AssetDescriptor("Textures\\Slime.png")], {})
    assert result.accessors[0].name == "Slime"
    assert result.accessors[0].path == "Textures\\Slime.png"


def test_qualified_backslash_path_joins_with_underscores() -> None:
    """Verify that a qualified name from a Windows path has no separators."""
    result = resolve(
        [AssetDescriptor("Textures\\Npc\\Slime.png"), AssetDescriptor("Slime.png")],
        {},
    )
    assert [(a.name, a.path) for a in result.accessors] == [
        ("Npc_Slime", "Textures\\Npc\\Slime.png"),
        ("Slime", "Slime.png"),
    ]


def test_disabled_run_is_empty() -> None:
    """Verify that a disabled configuration produces nothing."""
    result = resolve([AssetDescriptor("Items/Sword.png")], {"enabled": "false"})
    assert result.accessors == []
    assert result.diagnostics == []


def test_malformed_enabled_flag_falls_back_to_default() -> None:
    """Verify that an unparsable flag keeps generation enabled."""
    result = resolve([AssetDescriptor("Items/Sword.png")], {"enabled": "maybe"})
    assert [a.name for a in result.accessors] == ["Sword"]


def test_unpacked_assets_are_skipped() -> None:
    """Verify that assets not flagged for packing get no accessor."""
    result = resolve(
        [AssetDescriptor("A/X.png"), AssetDescriptor("B/X.png", pack=False)], {}
    )
    assert [a.name for a in result.accessors] == ["X"]
