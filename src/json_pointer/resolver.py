"""JSON Pointer resolution against decoded JSON documents.

Documents are expected to be what ``json.loads`` produces. Only ``dict`` and
``list`` values are traversed; every other value is a leaf. Behavior for
values outside the JSON data model (sets, tuples, NaN, custom objects) is not
defined.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from .pointer import JsonPointer, JsonPointerError, is_json_pointer, parse_json_pointer


logger = logging.getLogger("json_pointer.resolver")

Json = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

_ARRAY_INDEX_RE = re.compile(r"0|[1-9][0-9]*")

_MISSING = object()


@dataclass
class PointerReferencesNonexistentValue(JsonPointerError, LookupError):
    json_pointer: JsonPointer
    nonexistent_value_json_pointer: JsonPointer

    def __str__(self) -> str:
        return (
            f"JSON Pointer {self.json_pointer} is not valid because it references "
            f"a nonexistent value: {self.nonexistent_value_json_pointer}"
        )


def _coerce_pointer(pointer: Union[JsonPointer, str]) -> JsonPointer:
    if isinstance(pointer, str):
        return parse_json_pointer(pointer)
    if is_json_pointer(pointer):
        return pointer
    raise TypeError(f"Expected JSON Pointer string or JsonPointer, got {type(pointer).__name__}")


def _is_array_index(token: str) -> bool:
    return _ARRAY_INDEX_RE.fullmatch(token) is not None


def _lookup(current: Any, token: str) -> Any:
    if isinstance(current, list) and _is_array_index(token):
        # longer than any valid index; also keeps int() under its digit limit
        if len(token) > len(str(len(current))):
            return _MISSING
        idx = int(token)
        if idx < len(current):
            return current[idx]
        return _MISSING
    if isinstance(current, dict) and token in current:
        return current[token]
    return _MISSING


def get_value_at_json_pointer(document: Json, pointer: Union[JsonPointer, str]) -> Json:
    """Return the value ``pointer`` references inside ``document``.

    Raises ``PointerReferencesNonexistentValue`` naming the prefix up to and
    including the first token that could not be followed.
    """
    json_pointer = _coerce_pointer(pointer)
    current = document

    for idx, token in enumerate(json_pointer.reference_tokens):
        found = _lookup(current, token)
        if found is _MISSING:
            failing = json_pointer.prefix(idx + 1)
            logger.debug("JSON Pointer %s stops resolving at %s", json_pointer, failing)
            raise PointerReferencesNonexistentValue(json_pointer, failing)
        current = found

    return current


def value_exists_at_json_pointer(document: Json, pointer: Union[JsonPointer, str]) -> bool:
    try:
        get_value_at_json_pointer(document, pointer)
    except PointerReferencesNonexistentValue:
        return False
    return True
