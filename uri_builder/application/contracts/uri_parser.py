"""
IUriParser Interface - Abstract interface for URI parsing

Follows the Dependency Inversion Principle: the factory depends on this
abstraction, so any parser producing a full component map can be injected.
"""

from abc import ABC, abstractmethod

from uri_builder.domain.value_objects.components import ComponentMap


class IUriParser(ABC):
    """Abstract interface for splitting a URI string into components."""

    @abstractmethod
    def parse(self, uri: str) -> ComponentMap:
        """
        Parse a URI string into a component map.

        Args:
            uri: URI string to parse

        Returns:
            A map which MUST contain all eight keys: scheme, user, pass, host,
            port, path, query and fragment. Absent components are None,
            except path which is "".

        Raises:
            ParseError: If the string violates the URI grammar
        """
        pass
