"""
This module contains the UriFactory service, which creates Uri value objects
from strings or component maps and converts them between schemes.
"""

from typing import Any, FrozenSet, Mapping

from uri_builder.application.contracts.uri_factory import IUriFactory
from uri_builder.application.contracts.uri_parser import IUriParser
from uri_builder.domain.exceptions import InvalidArgumentError, UriBuilderError
from uri_builder.domain.scheme_registry import SchemeRegistry, normalize_scheme
from uri_builder.domain.value_objects.components import ComponentMap
from uri_builder.domain.value_objects.uri import Uri
from uri_builder.logger import get_logger

logger = get_logger(__name__)


class UriFactory(IUriFactory):
    """
    Creates Uri instances using an injected parser and scheme registry.

    The factory holds no mutable state; one instance can serve any number of
    builders.
    """

    def __init__(self, parser: IUriParser, registry: SchemeRegistry):
        """
        Initializes the factory with its dependencies.

        Args:
            parser: Parser producing full component maps from URI strings
            registry: Scheme registry resolving schemes to URI variants
        """
        self.parser = parser
        self.registry = registry
        self.logger = logger

    def parse(self, uri: str) -> ComponentMap:
        """Split a URI string into its component map using the injected parser."""
        return self.parser.parse(uri)

    def create(self, uri: str) -> Uri:
        try:
            components = self.parser.parse(uri)
            created = self.create_from_components(components)
        except UriBuilderError as e:
            self.logger.warning(f"Cannot create URI from `{uri}`: {e}")
            raise
        self.logger.debug(f"Created {created.variant.name} URI `{created}`")
        return created

    def create_from_components(self, components: Mapping[str, Any]) -> Uri:
        scheme = components.get("scheme")
        if not scheme or not str(scheme).strip():
            raise InvalidArgumentError(
                "Part URI scheme from components cannot be empty."
            )
        return Uri.from_components(components, self.registry)

    def transform(self, uri: Uri, scheme: str) -> Uri:
        """
        Convert a Uri to another scheme.

        A compatible scheme (same variant) only renames the scheme. Otherwise
        the URI is serialized, parsed again and rebuilt for the new scheme;
        components the target variant does not accept are dropped.

        Raises:
            UnsupportedSchemeError: If the new scheme is not supported
            InvalidArgumentError: If the URI cannot be expressed with the new
                scheme (e.g. no host for a scheme requiring one)
        """
        target = self.registry.resolve(scheme)

        if self.is_scheme_compatible(target.scheme, uri):
            self.logger.debug(f"Renaming scheme of `{uri}` to `{target.scheme}`")
            return uri.with_scheme(target.scheme)

        components = self.parser.parse(uri.to_string())
        components["scheme"] = target.scheme

        rules = target.variant.rules
        if not rules.allows_user_info:
            components["user"] = components["pass"] = None
        if not rules.allows_host:
            components["host"] = None
        if not rules.allows_port:
            components["port"] = None
        if not rules.allows_query:
            components["query"] = None
        if not rules.allows_fragment:
            components["fragment"] = None

        self.logger.debug(
            f"Transforming `{uri}` from {uri.variant.name} to {target.variant.name}"
        )
        return self.create_from_components(components)

    def is_scheme_supported(self, scheme: str) -> bool:
        return self.registry.is_supported(scheme)

    def get_supported_schemes(self) -> FrozenSet[str]:
        return self.registry.list_supported()

    def is_scheme_compatible(self, scheme: str, uri: Uri) -> bool:
        """
        Determines whether a Uri can take a scheme without being transformed.

        Raises:
            UnsupportedSchemeError: If the scheme is not supported
        """
        return self.registry.variant_of(normalize_scheme(scheme)) is uri.variant
