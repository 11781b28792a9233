"""
Naming utilities for safe code generation.

Checks that declared names are usable as-is in the generated source:
legal identifiers that do not collide with reserved words.
"""

import re
from typing import Set


class InvalidNameError(ValueError):
    """Raised when a declared name cannot be used in generated code."""

    pass


_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

JAVA_RESERVED: Set[str] = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "try", "void", "volatile",
    "while", "_",
}

JAVA_LITERALS: Set[str] = {"true", "false", "null"}


def is_valid_identifier(name: str) -> bool:
    """Check whether ``name`` is a legal, non-reserved Java identifier."""
    if not name or not _IDENTIFIER.fullmatch(name):
        return False
    return name not in JAVA_RESERVED and name not in JAVA_LITERALS


def validate_identifier(name: str, what: str = "name") -> str:
    """
    Validate a single identifier.

    Args:
        name: Identifier to check
        what: Description used in the error message (e.g. "field name")

    Returns:
        The unchanged name

    Raises:
        InvalidNameError: If the name is not a legal identifier
    """
    if not is_valid_identifier(name):
        raise InvalidNameError(f"Invalid {what}: {name!r}")
    return name


def validate_package_name(package: str) -> str:
    """Validate a dotted package name. The empty (default) package is allowed."""
    if package == "":
        return package

    for part in package.split("."):
        if not is_valid_identifier(part):
            raise InvalidNameError(f"Invalid package name: {package!r}")

    return package
