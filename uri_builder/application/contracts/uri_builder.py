"""
IUriBuilder Interface - Abstract interface for fluent URI building
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from uri_builder.domain.value_objects.uri import Uri
from uri_builder.infrastructure.encoding.percent_codec import QueryPairs


class IUriBuilder(ABC):
    """
    Abstract interface of a builder session.

    A session holds at most one Uri. The ``from_*`` methods (re)seed it, the
    ``set_*`` methods replace it with a modified copy and return the builder
    for chaining.
    """

    @abstractmethod
    def from_string(self, uri: str) -> "IUriBuilder":
        pass

    @abstractmethod
    def from_uri(self, uri: Uri) -> "IUriBuilder":
        pass

    @abstractmethod
    def from_components(self, components: Mapping[str, Any]) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_scheme(self, scheme: str) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_user_info(self, user: str, password: Optional[str] = None) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_host(self, host: str) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_port(self, port: Optional[int] = None) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_path(self, path: str) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_query(self, pairs: QueryPairs) -> "IUriBuilder":
        pass

    @abstractmethod
    def set_fragment(self, fragment: str) -> "IUriBuilder":
        pass

    @abstractmethod
    def get_uri(self) -> Uri:
        """
        Return a copy of the current Uri.

        Raises:
            UninitializedBuilderError: If the builder has not been seeded
        """
        pass
