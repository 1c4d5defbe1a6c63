"""
Closed set of URI variants and the structural rules each one enforces.

A URI value object is tagged with one UriVariant; validation and rendering
dispatch on that tag through VARIANT_RULES instead of through subclasses.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class UriVariant(Enum):
    DATA = "data"
    FILE = "file"
    FTP = "ftp"
    HTTP = "http"
    WS = "ws"

    @property
    def rules(self) -> "VariantRules":
        return VARIANT_RULES[self]


@dataclass(frozen=True)
class VariantRules:
    """
    Which components a variant accepts and how its authority is rendered.

    ``local_host_alias`` names a host that is equivalent to an empty host
    (``localhost`` for file URIs, RFC 8089).
    """

    allows_user_info: bool = True
    allows_host: bool = True
    requires_host: bool = False
    allows_port: bool = True
    allows_query: bool = True
    allows_fragment: bool = True
    always_render_authority: bool = False
    local_host_alias: Optional[str] = None

    @property
    def allows_authority(self) -> bool:
        return self.allows_user_info or self.allows_host or self.allows_port


VARIANT_RULES = MappingProxyType(
    {
        UriVariant.DATA: VariantRules(
            allows_user_info=False,
            allows_host=False,
            allows_port=False,
        ),
        UriVariant.FILE: VariantRules(
            allows_user_info=False,
            allows_port=False,
            always_render_authority=True,
            local_host_alias="localhost",
        ),
        # RFC 1738 ftpurl has neither query nor fragment
        UriVariant.FTP: VariantRules(
            requires_host=True,
            allows_query=False,
            allows_fragment=False,
        ),
        UriVariant.HTTP: VariantRules(requires_host=True),
        UriVariant.WS: VariantRules(requires_host=True),
    }
)
