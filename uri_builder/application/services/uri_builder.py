"""
This module contains the UriBuilder, a fluent session over one Uri at a time.
"""

from typing import Any, Mapping, Optional, Union

from uri_builder.application.contracts.uri_builder import IUriBuilder
from uri_builder.application.contracts.uri_factory import IUriFactory
from uri_builder.core.constants import DEFAULT_QUERY_SEPARATOR
from uri_builder.domain.exceptions import (
    InvalidArgumentError,
    UninitializedBuilderError,
)
from uri_builder.domain.value_objects.uri import Uri
from uri_builder.infrastructure.encoding.percent_codec import QueryPairs, encode_query
from uri_builder.logger import get_logger

logger = get_logger(__name__)


class UriBuilder(IUriBuilder):
    """
    Mutable cursor over a sequence of immutable Uri values.

    Every setter replaces the current Uri with a modified copy and returns
    the builder, so calls can be chained. A failed setter leaves the current
    Uri untouched. A builder is meant to be owned by a single thread.

    Example:
        >>> builder.from_string("wss://foo.bar:9999").set_scheme("https")
    """

    def __init__(
        self,
        factory: IUriFactory,
        uri: Union[Uri, Mapping[str, Any], str, None] = None,
        query_separator: str = DEFAULT_QUERY_SEPARATOR,
    ):
        """
        Initializes the builder, optionally seeding it.

        Args:
            factory: Factory used to create and transform Uri instances
            uri: A Uri, a component map or a URI string to start from
            query_separator: Separator placed between query pairs

        Raises:
            InvalidArgumentError: If ``uri`` is of an unsupported type
        """
        self.factory = factory
        self.query_separator = query_separator
        self._uri: Optional[Uri] = None

        if uri is None:
            return
        if isinstance(uri, Uri):
            self.from_uri(uri)
        elif isinstance(uri, Mapping):
            self.from_components(uri)
        elif isinstance(uri, str):
            self.from_string(uri)
        else:
            raise InvalidArgumentError(
                f"Instance of `{type(uri).__name__}` cannot be transformed into "
                "a URI object instance."
            )

    @property
    def is_initialized(self) -> bool:
        return self._uri is not None

    def _current(self, operation: str) -> Uri:
        if self._uri is None:
            raise UninitializedBuilderError(operation)
        return self._uri

    # Seeding

    def from_string(self, uri: str) -> "UriBuilder":
        self._uri = self.factory.create(uri)
        return self

    from_ = from_string

    def from_uri(self, uri: Uri) -> "UriBuilder":
        """Seed with a copy of ``uri``; the caller's instance is never aliased."""
        self._uri = uri.copy()
        return self

    def from_components(self, components: Mapping[str, Any]) -> "UriBuilder":
        self._uri = self.factory.create_from_components(components)
        return self

    # Setters

    def set_scheme(self, scheme: str) -> "UriBuilder":
        """Change the scheme, transforming the URI when the variant changes."""
        current = self._current("set_scheme")
        self._uri = self.factory.transform(current, scheme)
        logger.debug(f"Scheme set to `{self._uri.scheme}`")
        return self

    def set_user_info(self, user: str, password: Optional[str] = None) -> "UriBuilder":
        """An empty user removes the user information."""
        self._uri = self._current("set_user_info").with_user_info(user, password)
        return self

    def set_host(self, host: str) -> "UriBuilder":
        """An empty host removes the host."""
        self._uri = self._current("set_host").with_host(host)
        return self

    def set_port(self, port: Optional[int] = None) -> "UriBuilder":
        """
        A None port removes the port.

        Raises:
            InvalidPortError: For ports outside [0, 65535] or schemes without
                ports
        """
        self._uri = self._current("set_port").with_port(port)
        return self

    def set_path(self, path: str) -> "UriBuilder":
        """
        Domain-related paths should start with "/"; a rootless path gets one
        when the URI has an authority.
        """
        self._uri = self._current("set_path").with_path(path)
        return self

    def set_query(self, pairs: QueryPairs) -> "UriBuilder":
        """
        Set the query from raw key/value pairs, encoded per RFC 3986.

        An empty collection removes the query.
        """
        current = self._current("set_query")
        self._uri = current.with_query(encode_query(pairs, self.query_separator))
        return self

    def set_fragment(self, fragment: str) -> "UriBuilder":
        """An empty fragment removes the fragment."""
        self._uri = self._current("set_fragment").with_fragment(fragment)
        return self

    def get_uri(self) -> Uri:
        return self._current("get_uri").copy()

    def __str__(self) -> str:
        return self._current("__str__").to_string()
