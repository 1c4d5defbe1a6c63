"""
Host normalization (RFC 3986 section 3.2.2).
"""

import ipaddress

from uri_builder.core.rfc3986 import IPV_FUTURE_RE, REG_NAME_RE
from uri_builder.domain.exceptions import InvalidArgumentError
from uri_builder.infrastructure.encoding.percent_codec import normalize_percent_encoding


def _normalize_ip_literal(host: str) -> str:
    literal = host[1:-1]
    if IPV_FUTURE_RE.match(literal):
        return f"[{literal.lower()}]"
    try:
        address = ipaddress.IPv6Address(literal)
    except ValueError as exc:
        raise InvalidArgumentError(
            f"Invalid IP literal host `{host}`",
            context={"host": host},
            original_exception=exc,
        ) from exc
    return f"[{address.compressed}]"


def normalize_host(host: str) -> str:
    """
    Validate a host and return its canonical form.

    Reg-names are lower-cased, non-ASCII reg-names are IDNA-encoded and IPv6
    literals are compressed. An empty string is returned unchanged.

    Raises:
        InvalidArgumentError: If the host is not an IP-literal, an IPv4
            address or a reg-name.
    """
    if not host:
        return host

    if host.startswith("[") and host.endswith("]"):
        return _normalize_ip_literal(host)

    if not host.isascii():
        try:
            host = host.encode("idna").decode("ascii")
        except UnicodeError as exc:
            raise InvalidArgumentError(
                f"Host `{host}` cannot be IDNA-encoded",
                context={"host": host},
                original_exception=exc,
            ) from exc

    if not REG_NAME_RE.match(host):
        raise InvalidArgumentError(
            f"Invalid host `{host}`", context={"host": host}
        )

    return normalize_percent_encoding(host.lower())
