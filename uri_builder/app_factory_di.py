"""
Dependency Injection Module
Single Responsibility: Configure the bindings between the library's services.
"""
from typing import Any, Mapping, Optional, Union

from injector import Binder, Injector, Module, provider, singleton

from uri_builder.application.contracts.uri_factory import IUriFactory
from uri_builder.application.contracts.uri_parser import IUriParser
from uri_builder.application.services.uri_builder import UriBuilder
from uri_builder.application.services.uri_factory import UriFactory
from uri_builder.domain.scheme_registry import SchemeRegistry
from uri_builder.domain.value_objects.uri import Uri
from uri_builder.infrastructure.parsing.rfc3986_parser import Rfc3986Parser
from uri_builder.settings import Settings, get_settings


class UriBuilderModule(Module):
    def __init__(self, settings: Settings):
        self._settings = settings

    def configure(self, binder: Binder):
        binder.bind(Settings, to=self._settings, scope=singleton)

    @singleton
    @provider
    def provide_scheme_registry(self, settings: Settings) -> SchemeRegistry:
        return SchemeRegistry.default(omit_default_ports=settings.omit_default_ports)

    @singleton
    @provider
    def provide_parser(self) -> IUriParser:
        return Rfc3986Parser()

    @singleton
    @provider
    def provide_factory(
        self, parser: IUriParser, registry: SchemeRegistry
    ) -> IUriFactory:
        return UriFactory(parser=parser, registry=registry)

    # Builders are sessions; every request gets a fresh one
    @provider
    def provide_builder(self, factory: IUriFactory, settings: Settings) -> UriBuilder:
        return UriBuilder(factory=factory, query_separator=settings.query_separator)


def create_injector(settings: Optional[Settings] = None) -> Injector:
    """Build an injector wired with the library's services."""
    return Injector([UriBuilderModule(settings or get_settings())])


def create_builder(
    uri: Union[Uri, Mapping[str, Any], str, None] = None,
    injector: Optional[Injector] = None,
) -> UriBuilder:
    """
    Get a new UriBuilder, optionally seeded with a Uri, a component map or a
    URI string.
    """
    builder = (injector or create_injector()).get(UriBuilder)
    if isinstance(uri, Uri):
        return builder.from_uri(uri)
    if isinstance(uri, Mapping):
        return builder.from_components(uri)
    if uri is not None:
        return builder.from_string(uri)
    return builder
