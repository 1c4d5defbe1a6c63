"""
End-to-end usage of the public package API.
"""

import pytest

import uri_builder
from uri_builder import UnsupportedSchemeError, create_builder


def test_chained_build_from_websocket_uri():
    uri = (
        create_builder("wss://foo.bar:9999")
        .set_scheme("https")
        .set_host("api.foo.bar")
        .set_fragment("foobar")
        .set_port(443)
        .set_path("/v1")
        .set_query({"api_token": "Qwerty! @#$TYu"})
        .get_uri()
    )

    assert uri.to_string() == (
        "https://api.foo.bar/v1?api_token=Qwerty%21%20%40%23%24TYu#foobar"
    )
    assert uri.query_pairs() == [("api_token", "Qwerty! @#$TYu")]


def test_unsupported_scheme_is_named():
    with pytest.raises(UnsupportedSchemeError, match="gopher") as exc_info:
        create_builder("gopher://x")
    assert exc_info.value.to_dict()["error_code"] == "UNSUPPORTED_SCHEME"


def test_round_trip_through_components():
    builder = create_builder("sftp://user@example.com:27015/foo/bar")
    uri = builder.get_uri()
    assert str(create_builder(uri.components()).get_uri()) == str(uri)


def test_package_exports():
    for name in uri_builder.__all__:
        assert hasattr(uri_builder, name)
