"""
Tests for the component map helpers.
"""

import pytest

from uri_builder.core.constants import COMPONENT_KEYS
from uri_builder.domain.exceptions import InvalidArgumentError, InvalidPortError
from uri_builder.domain.value_objects.components import (
    empty_components,
    normalize_components,
)


def test_empty_components_has_every_key():
    components = empty_components()
    assert tuple(components) == COMPONENT_KEYS
    assert components["path"] == ""
    assert all(components[key] is None for key in COMPONENT_KEYS if key != "path")


def test_normalize_fills_missing_keys():
    components = normalize_components({"scheme": "http", "host": "example.com"})
    assert tuple(components) == COMPONENT_KEYS
    assert components["scheme"] == "http"
    assert components["query"] is None
    assert components["path"] == ""


def test_normalize_converts_numeric_string_port():
    assert normalize_components({"port": "8080"})["port"] == 8080
    assert normalize_components({"port": ""})["port"] is None


def test_normalize_turns_none_path_into_empty_string():
    assert normalize_components({"path": None})["path"] == ""


@pytest.mark.parametrize("port", ["http", "-1", "²", "٣", "80\n", 1.5, True])
def test_normalize_rejects_non_integer_port(port):
    with pytest.raises(InvalidPortError):
        normalize_components({"port": port})


def test_normalize_rejects_unknown_keys():
    with pytest.raises(InvalidArgumentError, match="Unknown URI components: params"):
        normalize_components({"scheme": "http", "params": "x"})


def test_normalize_rejects_non_string_values():
    with pytest.raises(InvalidArgumentError, match="`host` must be a string"):
        normalize_components({"host": 42})
