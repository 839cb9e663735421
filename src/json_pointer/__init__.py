"""JSON Pointer (RFC 6901) utilities."""

from .pointer import (
    InvalidPointerSyntax,
    JsonPointer,
    JsonPointerError,
    escape_reference_token,
    is_json_pointer,
    is_valid_json_pointer,
    json_pointer_to_string,
    parse_json_pointer,
    unescape_reference_token,
)
from .resolver import (
    Json,
    PointerReferencesNonexistentValue,
    get_value_at_json_pointer,
    value_exists_at_json_pointer,
)

__all__ = [
    "InvalidPointerSyntax",
    "Json",
    "JsonPointer",
    "JsonPointerError",
    "PointerReferencesNonexistentValue",
    "escape_reference_token",
    "get_value_at_json_pointer",
    "is_json_pointer",
    "is_valid_json_pointer",
    "json_pointer_to_string",
    "parse_json_pointer",
    "unescape_reference_token",
    "value_exists_at_json_pointer",
]
