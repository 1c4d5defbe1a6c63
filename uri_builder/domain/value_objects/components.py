"""
Component Map helpers.

A component map is a plain dict holding exactly the eight URI components,
in canonical order. Absent components are ``None`` except ``path`` which
defaults to the empty string, so callers may index any key without checks.
"""

from typing import Any, Dict, Mapping, Optional

from uri_builder.core.constants import COMPONENT_KEYS
from uri_builder.core.rfc3986 import PORT_RE
from uri_builder.domain.exceptions import InvalidArgumentError, InvalidPortError

ComponentMap = Dict[str, Any]


def empty_components() -> ComponentMap:
    """Return a component map with every component absent."""
    components = dict.fromkeys(COMPONENT_KEYS)
    components["path"] = ""
    return components


def _coerce_port(port: Any) -> Optional[int]:
    if port is None or port == "":
        return None
    if isinstance(port, bool):
        raise InvalidPortError(port, "port must be an integer")
    if isinstance(port, int):
        return port
    if isinstance(port, str) and port and PORT_RE.fullmatch(port):
        return int(port)
    raise InvalidPortError(port, "port must be an integer")


def normalize_components(components: Mapping[str, Any]) -> ComponentMap:
    """
    Return a full component map built from a possibly partial mapping.

    Missing keys get their absent marker, a numeric string port becomes an
    int and a ``None`` path becomes ``""``.

    Raises:
        InvalidArgumentError: If the mapping holds keys that are not URI
            components or a non-string component value.
        InvalidPortError: If the port is not an integer.
    """
    unknown = set(components) - set(COMPONENT_KEYS)
    if unknown:
        raise InvalidArgumentError(
            f"Unknown URI components: {', '.join(sorted(map(str, unknown)))}",
            context={"components": sorted(map(str, unknown))},
        )

    normalized = empty_components()
    for key in COMPONENT_KEYS:
        if key not in components:
            continue
        value = components[key]
        if key == "port":
            normalized[key] = _coerce_port(value)
        elif key == "path":
            normalized[key] = "" if value is None else value
        else:
            normalized[key] = value

        if key != "port" and normalized[key] is not None and not isinstance(
            normalized[key], str
        ):
            raise InvalidArgumentError(
                f"URI component `{key}` must be a string, "
                f"got {type(normalized[key]).__name__}",
                context={"component": key},
            )
    return normalized
