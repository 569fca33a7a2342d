"""Character-set checks for generated accessor identifiers."""

import re
import string
from collections.abc import Container

# The backslash is the separator placeholder; split_path removes every one
# before naming, so emitted names never contain it.
IDENTIFIER_RE = re.compile(r"[A-Za-z0-9_\\]+")

# Reserved C# keywords; contextual keywords are legal member names.
CSHARP_KEYWORDS = frozenset(
    {
        "abstract", "as", "base", "bool", "break", "byte", "case", "catch",
        "char", "checked", "class", "const", "continue", "decimal", "default",
        "delegate", "do", "double", "else", "enum", "event", "explicit",
        "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "goto", "if", "implicit", "in", "int", "interface", "internal", "is",
        "lock", "long", "namespace", "new", "null", "object", "operator",
        "out", "override", "params", "private", "protected", "public",
        "readonly", "ref", "return", "sbyte", "sealed", "short", "sizeof",
        "stackalloc", "static", "string", "struct", "switch", "this", "throw",
        "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe",
        "ushort", "using", "virtual", "void", "volatile", "while",
    }
)  # fmt: skip


def is_valid_identifier(name: str) -> bool:
    """Return True if every character of a non-empty name is accepted."""
    return IDENTIFIER_RE.fullmatch(name) is not None


def starts_with_digit(name: str) -> bool:
    """Return True if the name begins with an ASCII digit."""
    return bool(name) and name[0] in string.digits


def is_emittable_identifier(name: str, reserved: Container[str] = ()) -> bool:
    """Return True if the name can be emitted as a member name as-is.

    ``reserved`` holds names already taken inside the generated class, such
    as the class name itself.
    """
    return (
        is_valid_identifier(name)
        and not starts_with_digit(name)
        and name not in CSHARP_KEYWORDS
        and name not in reserved
    )
