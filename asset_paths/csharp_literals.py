"""Helpers for writing C# string literals."""


def csharp_string(text: str) -> str:
    """Quote text as a regular C# string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def csharp_verbatim_string(text: str) -> str:
    """Quote text as a verbatim C# literal, keeping backslashes as written."""
    return '@"' + text.replace('"', '""') + '"'
