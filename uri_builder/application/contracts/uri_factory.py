"""
IUriFactory Interface - Abstract interface for creating URI value objects
"""

from abc import ABC, abstractmethod
from typing import Any, FrozenSet, Mapping

from uri_builder.domain.value_objects.uri import Uri


class IUriFactory(ABC):
    """Abstract interface for creating and transforming Uri instances."""

    @abstractmethod
    def create(self, uri: str) -> Uri:
        """
        Create a new Uri from a URI string.

        Raises:
            ParseError: If the string cannot be parsed
            InvalidArgumentError: If the string has no scheme
            UnsupportedSchemeError: If the scheme is not supported
        """
        pass

    @abstractmethod
    def create_from_components(self, components: Mapping[str, Any]) -> Uri:
        """
        Create a new Uri from a component map; the scheme is required.
        """
        pass

    @abstractmethod
    def transform(self, uri: Uri, scheme: str) -> Uri:
        """
        Convert a Uri to another scheme, re-deriving its components when the
        target scheme belongs to another variant.
        """
        pass

    @abstractmethod
    def is_scheme_supported(self, scheme: str) -> bool:
        pass

    @abstractmethod
    def get_supported_schemes(self) -> FrozenSet[str]:
        pass
