"""Render the generated C# accessor class for a mod's assets."""

from collections.abc import Sequence

from asset_paths.csharp_literals import csharp_string, csharp_verbatim_string
from asset_paths.resolution_result import AccessorSpec

REPOSITORY_FIELD = "_repo"


def render_accessor_class(
    accessors: Sequence[AccessorSpec],
    *,
    type_name: str,
    namespace: str,
    mod_name: str,
) -> str:
    """Render one static class exposing an accessor per asset.

    The class is always complete, even when no accessor survived resolution.
    """
    repo = REPOSITORY_FIELD
    lines = [
        "// <auto-generated/>",
        "using ReLogic.Content;",
        "using Terraria.ModLoader;",
        "",
        f"namespace {namespace};",
        "",
        f"public static class {type_name}",
        "{",
        f"\tprivate static readonly AssetRepository {repo};",
        "",
        f"\tstatic {type_name}()",
        "\t{",
        f"\t\t{repo} = ModLoader.GetMod({csharp_string(mod_name)}).Assets;",
        "\t}",
    ]
    for spec in accessors:
        lines.extend(
            [
                "",
                f"\t/// <summary>{_xml_escape(spec.source_path)}</summary>",
                f"\tpublic static Asset<T> {spec.name}<T>() where T : class",
                f"\t\t=> {repo}.Request<T>({csharp_verbatim_string(spec.path)});",
            ]
        )
    lines.append("}")
    return "\n".join(lines) + "\n"


def _xml_escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
