"""
Scheme Registry.

Maps a normalized scheme name to the URI variant that implements it and to
the scheme's default port. A registry is populated once at construction and
is read-only afterwards, so one instance can be shared by every factory and
builder without locking.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import FrozenSet, Iterable, Optional

from uri_builder.core.constants import (
    FTP_DEFAULT_PORT,
    FTPS_DEFAULT_PORT,
    HTTP_DEFAULT_PORT,
    HTTPS_DEFAULT_PORT,
    SFTP_DEFAULT_PORT,
    WS_DEFAULT_PORT,
    WSS_DEFAULT_PORT,
)
from uri_builder.domain.exceptions import InvalidArgumentError, UnsupportedSchemeError
from uri_builder.domain.value_objects.variants import UriVariant


def normalize_scheme(scheme: str) -> str:
    """Lowercase and trim a scheme name."""
    return scheme.strip().lower()


@dataclass(frozen=True)
class SchemeDescriptor:
    """Registry entry describing one scheme."""

    scheme: str
    variant: UriVariant
    default_port: Optional[int] = None
    omit_default_port: bool = True

    def is_default_port(self, port: Optional[int]) -> bool:
        return port is not None and port == self.default_port


DEFAULT_SCHEME_TABLE = (
    ("data", UriVariant.DATA, None),
    ("file", UriVariant.FILE, None),
    ("ftp", UriVariant.FTP, FTP_DEFAULT_PORT),
    ("sftp", UriVariant.FTP, SFTP_DEFAULT_PORT),
    ("ftps", UriVariant.FTP, FTPS_DEFAULT_PORT),
    ("http", UriVariant.HTTP, HTTP_DEFAULT_PORT),
    ("https", UriVariant.HTTP, HTTPS_DEFAULT_PORT),
    ("ws", UriVariant.WS, WS_DEFAULT_PORT),
    ("wss", UriVariant.WS, WSS_DEFAULT_PORT),
)


class SchemeRegistry:
    """
    Read-only lookup table from scheme name to SchemeDescriptor.
    """

    def __init__(self, descriptors: Iterable[SchemeDescriptor]):
        entries = {}
        for descriptor in descriptors:
            scheme = normalize_scheme(descriptor.scheme)
            if not scheme:
                raise InvalidArgumentError("Registry scheme names cannot be empty.")
            if scheme in entries:
                raise InvalidArgumentError(
                    f"Scheme `{scheme}` is registered more than once.",
                    context={"scheme": scheme},
                )
            if scheme != descriptor.scheme:
                descriptor = SchemeDescriptor(
                    scheme=scheme,
                    variant=descriptor.variant,
                    default_port=descriptor.default_port,
                    omit_default_port=descriptor.omit_default_port,
                )
            entries[scheme] = descriptor
        self._entries = MappingProxyType(entries)

    @classmethod
    def default(cls, omit_default_ports: bool = True) -> "SchemeRegistry":
        """Build the registry of the schemes supported out of the box."""
        return cls(
            SchemeDescriptor(scheme, variant, port, omit_default_ports)
            for scheme, variant, port in DEFAULT_SCHEME_TABLE
        )

    def resolve(self, scheme: str) -> SchemeDescriptor:
        """
        Get the descriptor registered for a scheme.

        Raises:
            UnsupportedSchemeError: If the scheme is not registered.
        """
        normalized = normalize_scheme(scheme)
        try:
            return self._entries[normalized]
        except KeyError:
            raise UnsupportedSchemeError(normalized) from None

    def variant_of(self, scheme: str) -> UriVariant:
        return self.resolve(scheme).variant

    def default_port(self, scheme: str) -> Optional[int]:
        return self.resolve(scheme).default_port

    def is_supported(self, scheme: str) -> bool:
        return normalize_scheme(scheme) in self._entries

    def list_supported(self) -> FrozenSet[str]:
        return frozenset(self._entries)

    def are_compatible(self, scheme: str, other: str) -> bool:
        """Two schemes are compatible when they resolve to the same variant."""
        return self.variant_of(scheme) is self.variant_of(other)

    def __contains__(self, scheme: object) -> bool:
        return isinstance(scheme, str) and self.is_supported(scheme)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SchemeRegistry({sorted(self._entries)})"
