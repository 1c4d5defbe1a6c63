"""
RFC 3986 URI parser.

Splits a URI string into the eight-key component map consumed by the
UriFactory, validating the generic syntax on the way.
"""

from typing import Optional, Tuple

from uri_builder.application.contracts.uri_parser import IUriParser
from uri_builder.core.rfc3986 import (
    FORBIDDEN_CHARS_RE,
    MALFORMED_PCT_RE,
    PORT_RE,
    SCHEME_RE,
    URI_SPLIT_RE,
    USERINFO_RE,
)
from uri_builder.domain.exceptions import InvalidArgumentError, ParseError
from uri_builder.domain.value_objects.components import ComponentMap, empty_components
from uri_builder.domain.value_objects.host import normalize_host
from uri_builder.infrastructure.encoding.percent_codec import normalize_percent_encoding


class Rfc3986Parser(IUriParser):
    """
    Stateless parser for RFC 3986 URI references.

    Path, query and fragment are returned with RFC 3986 section 6.2.2.2
    normalization applied: triplets encoding unreserved characters are
    decoded, the remaining ones are upper-cased. Reserved characters stay
    encoded so that delimiters inside values survive the round trip.
    """

    def parse(self, uri: str) -> ComponentMap:
        if not isinstance(uri, str):
            raise ParseError(repr(uri), "URI must be a string")
        if not uri:
            raise ParseError(uri, "URI string is empty")

        forbidden = FORBIDDEN_CHARS_RE.search(uri)
        if forbidden:
            raise ParseError(
                uri,
                f"invalid character {forbidden.group()!r} at offset {forbidden.start()}",
            )

        match = URI_SPLIT_RE.match(uri)
        if match is None:
            raise ParseError(uri, "does not match the URI-reference grammar")

        components = empty_components()

        scheme = match.group("scheme")
        if scheme is not None:
            if not SCHEME_RE.match(scheme):
                raise ParseError(uri, f"invalid scheme `{scheme}`")
            components["scheme"] = scheme

        authority = match.group("authority")
        if authority is not None:
            user, password, host, port = self._parse_authority(uri, authority)
            components["user"] = user
            components["pass"] = password
            components["host"] = host
            components["port"] = port

        components["path"] = self._normalize(uri, match.group("path"), "path")
        components["query"] = self._normalize(uri, match.group("query"), "query")
        components["fragment"] = self._normalize(
            uri, match.group("fragment"), "fragment"
        )
        return components

    def _normalize(self, uri: str, value: Optional[str], name: str) -> Optional[str]:
        if value is None:
            return None
        malformed = MALFORMED_PCT_RE.search(value)
        if malformed:
            raise ParseError(
                uri, f"malformed percent-encoding in {name} at offset {malformed.start()}"
            )
        return normalize_percent_encoding(value)

    def _parse_authority(
        self, uri: str, authority: str
    ) -> Tuple[Optional[str], Optional[str], str, Optional[int]]:
        user = password = None
        userinfo, at, host_port = authority.rpartition("@")
        if at:
            if not USERINFO_RE.match(userinfo):
                raise ParseError(uri, f"invalid user information `{userinfo}`")
            user, colon, password = userinfo.partition(":")
            user = normalize_percent_encoding(user)
            password = normalize_percent_encoding(password) if colon else None

        host, port = self._split_host_port(uri, host_port)
        try:
            host = normalize_host(host)
        except InvalidArgumentError as exc:
            raise ParseError(uri, exc.message, original_exception=exc) from exc
        return user, password, host, port

    def _split_host_port(self, uri: str, host_port: str) -> Tuple[str, Optional[int]]:
        if host_port.startswith("["):
            end = host_port.find("]")
            if end == -1:
                raise ParseError(uri, "unterminated IP literal in authority")
            host, rest = host_port[: end + 1], host_port[end + 1 :]
            if rest and not rest.startswith(":"):
                raise ParseError(uri, f"unexpected `{rest}` after IP literal")
            port = rest[1:] if rest else ""
        else:
            host, _, port = host_port.partition(":")

        if not PORT_RE.match(port):
            raise ParseError(uri, f"invalid port `{port}`")
        return host, int(port) if port else None
