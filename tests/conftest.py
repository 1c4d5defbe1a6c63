import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from uri_builder.application.services.uri_builder import UriBuilder  # noqa: E402
from uri_builder.application.services.uri_factory import UriFactory  # noqa: E402
from uri_builder.domain.scheme_registry import SchemeRegistry  # noqa: E402
from uri_builder.infrastructure.parsing.rfc3986_parser import Rfc3986Parser  # noqa: E402


@pytest.fixture
def registry():
    return SchemeRegistry.default()


@pytest.fixture
def parser():
    return Rfc3986Parser()


@pytest.fixture
def factory(parser, registry):
    return UriFactory(parser=parser, registry=registry)


@pytest.fixture
def builder(factory):
    return UriBuilder(factory)


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
