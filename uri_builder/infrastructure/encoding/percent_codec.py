"""
Percent-encoding and query codec (RFC 3986 sections 2 and 3.4).

This module is the single point where component text is percent-encoded.
Two flavours exist:

* quote()/encode_query() fully encode raw (decoded) text: only unreserved
  characters pass through. This is what builds a query from key/value pairs.
* normalize_component() canonicalizes text that may already be partially
  encoded: it escapes what the component does not allow literally but keeps
  valid ``%XX`` triplets, so it never double-encodes.
"""

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote as _urlquote

from uri_builder.core.constants import (
    DEFAULT_QUERY_SEPARATOR,
    HEXDIG,
    QUERY_KEY_VALUE_SEPARATOR,
    UNRESERVED,
)
from uri_builder.domain.exceptions import ParseError

QueryPairs = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

_UNRESERVED_SET = frozenset(UNRESERVED)
_HEXDIG_SET = frozenset(HEXDIG)


def _is_triplet(text: str, index: int) -> bool:
    return (
        index + 2 < len(text)
        and text[index + 1] in _HEXDIG_SET
        and text[index + 2] in _HEXDIG_SET
    )


def quote(text: str, safe: str = "") -> str:
    """
    Percent-encode every character except unreserved ones and ``safe``.

    A literal ``%`` is always encoded, so the input is treated as raw text.
    """
    return _urlquote(text, safe=safe.replace("%", ""))


def unquote(text: str) -> str:
    """
    Decode every percent-encoded triplet of ``text`` as UTF-8.

    Raises:
        ParseError: If a ``%`` does not start a valid triplet or the decoded
            octets are not valid UTF-8.
    """
    if "%" not in text:
        return text

    buffer = bytearray()
    index = 0
    while index < len(text):
        char = text[index]
        if char == "%":
            if not _is_triplet(text, index):
                raise ParseError(text, f"malformed percent-encoding at offset {index}")
            buffer.append(int(text[index + 1 : index + 3], 16))
            index += 3
            continue
        buffer.extend(char.encode("utf-8"))
        index += 1

    try:
        return buffer.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(
            text, "percent-encoded octets are not valid UTF-8", original_exception=exc
        ) from exc


def normalize_component(text: str, safe: str = "") -> str:
    """
    Canonicalize a component for storage in a URI value object.

    Characters outside unreserved + ``safe`` are encoded as upper-case UTF-8
    triplets. Existing valid triplets are kept with their hex digits
    upper-cased, except those encoding an unreserved character which are
    decoded; a stray ``%`` becomes ``%25``.
    """
    allowed = _UNRESERVED_SET.union(safe) - {"%"}
    result = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == "%" and _is_triplet(text, index):
            decoded = chr(int(text[index + 1 : index + 3], 16))
            if decoded in _UNRESERVED_SET:
                result.append(decoded)
            else:
                result.append(text[index : index + 3].upper())
            index += 3
            continue
        result.append(char if char in allowed else quote(char))
        index += 1
    return "".join(result)


def normalize_percent_encoding(text: str) -> str:
    """
    Apply RFC 3986 section 6.2.2.2 normalization to ``text``.

    Triplets that encode an unreserved character are decoded, all other
    triplets are upper-cased. Everything else is left untouched.

    Raises:
        ParseError: On a ``%`` that does not start a valid triplet.
    """
    if "%" not in text:
        return text

    result = []
    index = 0
    while index < len(text):
        char = text[index]
        if char != "%":
            result.append(char)
            index += 1
            continue
        if not _is_triplet(text, index):
            raise ParseError(text, f"malformed percent-encoding at offset {index}")
        decoded = chr(int(text[index + 1 : index + 3], 16))
        if decoded in _UNRESERVED_SET:
            result.append(decoded)
        else:
            result.append(text[index : index + 3].upper())
        index += 3
    return "".join(result)


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _iter_pairs(pairs: QueryPairs) -> Iterable[Tuple[str, Any]]:
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    for key, value in items:
        if isinstance(value, (list, tuple)):
            for item in value:
                yield key, item
        else:
            yield key, value


def encode_query(pairs: QueryPairs, separator: str = DEFAULT_QUERY_SEPARATOR) -> str:
    """
    Build a query string from ordered key/value pairs.

    Keys and values are supplied raw and fully percent-encoded here (space is
    ``%20``, never ``+``). A ``None`` value emits the bare key and list values
    repeat the key. An empty input produces ``""``, meaning "no query".

    Example:
        >>> encode_query({"api_token": "Qwerty! @#$TYu"})
        'api_token=Qwerty%21%20%40%23%24TYu'
    """
    segments = []
    for key, value in _iter_pairs(pairs):
        encoded_key = quote(_stringify(key))
        if value is None:
            segments.append(encoded_key)
        else:
            segments.append(
                f"{encoded_key}{QUERY_KEY_VALUE_SEPARATOR}{quote(_stringify(value))}"
            )
    return separator.join(segments)


def decode_query(
    query: Optional[str], separator: str = DEFAULT_QUERY_SEPARATOR
) -> List[Tuple[str, Optional[str]]]:
    """
    Split a query string into decoded key/value pairs.

    ``+`` is kept literally. A segment without ``=`` decodes to ``(key, None)``
    so that encode_query() reproduces it; empty segments are skipped.
    """
    if not query:
        return []

    pairs = []
    for segment in query.split(separator):
        if not segment:
            continue
        key, found, value = segment.partition(QUERY_KEY_VALUE_SEPARATOR)
        pairs.append((unquote(key), unquote(value) if found else None))
    return pairs
