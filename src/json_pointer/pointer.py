"""JSON Pointer (RFC 6901) parsing and serialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Tuple
from urllib.parse import quote, unquote


logger = logging.getLogger("json_pointer.pointer")

# encodeURIComponent set; quote() always keeps A-Za-z0-9_.-~ on top of this.
_FRAGMENT_SAFE = "!*'()"


class JsonPointerError(Exception):
    """Base class for JSON Pointer errors."""


@dataclass
class InvalidPointerSyntax(JsonPointerError, ValueError):
    invalid_pointer: str

    def __str__(self) -> str:
        return f'JSON Pointer "{self.invalid_pointer}" has invalid pointer syntax'


@dataclass(frozen=True)
class JsonPointer:
    """Parsed JSON Pointer.

    An empty ``reference_tokens`` tuple points to the whole document.
    ``uses_fragment_representation`` selects the ``#``-prefixed, percent-encoded
    text form when serializing.
    """

    reference_tokens: Tuple[str, ...] = field(default_factory=tuple)
    uses_fragment_representation: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.reference_tokens, str):
            raise TypeError("reference_tokens must be a sequence of strings, not a single string")
        if not isinstance(self.reference_tokens, tuple):
            object.__setattr__(self, "reference_tokens", tuple(self.reference_tokens))

    @classmethod
    def from_string(cls, text: str) -> "JsonPointer":
        return parse_json_pointer(text)

    def prefix(self, length: int) -> "JsonPointer":
        """Return a pointer made of the first ``length`` tokens, same dialect."""
        return JsonPointer(self.reference_tokens[:length], self.uses_fragment_representation)

    def __str__(self) -> str:
        return json_pointer_to_string(self)


def is_valid_json_pointer(text: str) -> bool:
    if text.startswith("#"):
        text = text[1:]
    return text == "" or text.startswith("/")


def is_json_pointer(value: Any) -> bool:
    """Return True if ``value`` is a well-formed ``JsonPointer``."""
    if not isinstance(value, JsonPointer):
        return False
    if not isinstance(value.uses_fragment_representation, bool):
        return False
    return all(isinstance(token, str) for token in value.reference_tokens)


def unescape_reference_token(token: str, uri_fragment: bool = False) -> str:
    """Undo pointer escaping: ``~1`` -> ``/``, then ``~0`` -> ``~``.

    Under the fragment dialect the result is percent-decoded afterwards, so
    ``~`` sequences produced by decoding are never unescaped a second time.
    """
    token = token.replace("~1", "/").replace("~0", "~")
    if uri_fragment:
        try:
            token = unquote(token, errors="surrogatepass")
        except UnicodeDecodeError:
            # not UTF-8 at all; fall back to U+FFFD replacement
            token = unquote(token)
    return token


def escape_reference_token(token: str, uri_fragment: bool = False) -> str:
    """Escape ``~`` -> ``~0``, then ``/`` -> ``~1``; percent-encode for fragments."""
    token = token.replace("~", "~0").replace("/", "~1")
    if uri_fragment:
        token = quote(token.encode("utf-8", "surrogatepass"), safe=_FRAGMENT_SAFE)
    return token


def parse_json_pointer(text: str) -> JsonPointer:
    if not is_valid_json_pointer(text):
        logger.debug("rejected JSON Pointer syntax: %r", text)
        raise InvalidPointerSyntax(text)

    uri_fragment = text.startswith("#")
    remainder = text[1:] if uri_fragment else text
    if remainder == "":
        return JsonPointer((), uri_fragment)

    tokens = [
        unescape_reference_token(raw_token, uri_fragment)
        for raw_token in remainder[1:].split("/")
    ]
    return JsonPointer(tuple(tokens), uri_fragment)


def _join_tokens(tokens: Iterable[str], uri_fragment: bool) -> str:
    escaped = [escape_reference_token(token, uri_fragment) for token in tokens]
    return "/" + "/".join(escaped) if escaped else ""


def json_pointer_to_string(pointer: JsonPointer) -> str:
    text = _join_tokens(pointer.reference_tokens, pointer.uses_fragment_representation)
    if pointer.uses_fragment_representation:
        return "#" + text
    return text
