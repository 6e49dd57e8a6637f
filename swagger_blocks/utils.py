"""
Utility functions for JSON pointer handling.
"""

from __future__ import annotations

from typing import Any

REF_KEY = "$ref"
POINTER_PREFIX = "#/"


def is_pointer_key(key: str) -> bool:
    """Check if a field name must be treated as an opaque pointer.

    Examples:
        "$ref" -> True
        "#/parameters/Pet" -> True
        "properties" -> False
    """
    return key == REF_KEY or key.startswith(POINTER_PREFIX)


def is_pointer(value: Any) -> bool:
    """Check if a value is already a local JSON pointer ("#/...")."""
    return isinstance(value, str) and value.startswith(POINTER_PREFIX)


def is_reference(value: Any) -> bool:
    """Check if a serialized value is a $ref object such as {"$ref": "Pet"}."""
    return isinstance(value, dict) and REF_KEY in value


def qualify_ref(value: Any, prefix: str) -> Any:
    """Turn a bare definition name into a local pointer.

    Examples:
        ("Pet", "#/definitions/") -> "#/definitions/Pet"
        ("#/parameters/Pet", "#/definitions/") -> "#/parameters/Pet"

    Args:
        value: The $ref value as declared
        prefix: Pointer prefix to prepend to bare names

    Returns:
        The qualified pointer, or the value unchanged if it is not a bare name
    """
    if not isinstance(value, str) or is_pointer(value):
        return value
    return f"{prefix}{value}"


def qualify_refs(document: Any, prefix: str) -> Any:
    """Recursively qualify every bare $ref value of a serialized document in place."""
    if isinstance(document, dict):
        for key, value in document.items():
            if key == REF_KEY:
                document[key] = qualify_ref(value, prefix)
            else:
                qualify_refs(value, prefix)
    elif isinstance(document, list):
        for item in document:
            qualify_refs(item, prefix)
    return document
