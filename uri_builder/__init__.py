"""
uri_builder - build, parse and mutate RFC 3986 URIs.

Example:
    >>> from uri_builder import create_builder
    >>> str(create_builder("wss://foo.bar:9999").set_scheme("https").get_uri())
    'https://foo.bar:9999'
"""

__version__ = "0.1.0"

from uri_builder.app_factory_di import UriBuilderModule, create_builder, create_injector
from uri_builder.application.services.uri_builder import UriBuilder
from uri_builder.application.services.uri_factory import UriFactory
from uri_builder.domain.exceptions import (
    InvalidArgumentError,
    InvalidPortError,
    ParseError,
    UninitializedBuilderError,
    UnsupportedSchemeError,
    UriBuilderError,
)
from uri_builder.domain.scheme_registry import SchemeDescriptor, SchemeRegistry
from uri_builder.domain.value_objects.components import (
    empty_components,
    normalize_components,
)
from uri_builder.domain.value_objects.uri import Uri
from uri_builder.domain.value_objects.variants import UriVariant
from uri_builder.infrastructure.encoding.percent_codec import decode_query, encode_query
from uri_builder.infrastructure.parsing.rfc3986_parser import Rfc3986Parser

__all__ = [
    "UriBuilderModule",
    "create_builder",
    "create_injector",
    "UriBuilder",
    "UriFactory",
    "UriBuilderError",
    "ParseError",
    "InvalidArgumentError",
    "UnsupportedSchemeError",
    "InvalidPortError",
    "UninitializedBuilderError",
    "SchemeDescriptor",
    "SchemeRegistry",
    "empty_components",
    "normalize_components",
    "Uri",
    "UriVariant",
    "decode_query",
    "encode_query",
    "Rfc3986Parser",
]
