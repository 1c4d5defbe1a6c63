"""
Immutable URI value object.

A Uri holds the eight URI components in canonical, percent-encoded form and
is tagged with the UriVariant whose rules it obeys. Every ``with_*`` method
validates its input against those rules and returns a new instance; a Uri is
never modified after construction.
"""

from dataclasses import dataclass, field, replace
from typing import Any, List, Mapping, Optional, Tuple

from uri_builder.core.constants import (
    FRAGMENT_SAFE,
    MAX_PORT,
    MIN_PORT,
    PASSWORD_SAFE,
    PATH_SAFE,
    QUERY_SAFE,
    USERINFO_SAFE,
)
from uri_builder.domain.exceptions import InvalidArgumentError, InvalidPortError
from uri_builder.domain.scheme_registry import SchemeDescriptor, SchemeRegistry
from uri_builder.domain.value_objects.components import (
    ComponentMap,
    normalize_components,
)
from uri_builder.domain.value_objects.host import normalize_host
from uri_builder.domain.value_objects.variants import UriVariant
from uri_builder.infrastructure.encoding.percent_codec import (
    decode_query,
    normalize_component,
)


def _validate_port(port: Any) -> Optional[int]:
    if port is None:
        return None
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidPortError(port, "port must be an integer")
    if not MIN_PORT <= port <= MAX_PORT:
        raise InvalidPortError(
            port, f"port must be within the range [{MIN_PORT}, {MAX_PORT}]"
        )
    return port


def _fit_path(path: str, has_authority: bool) -> str:
    # RFC 3986 section 3.3: with an authority the path is empty or absolute,
    # without one it cannot begin with "//"
    if has_authority:
        if path and not path.startswith("/"):
            return "/" + path
        return path
    if path.startswith("//"):
        return "/" + path.lstrip("/")
    return path


@dataclass(frozen=True)
class Uri:
    """
    Represents an RFC 3986 URI of one of the supported scheme families.

    Create instances through Uri.from_components() or a UriFactory; the
    constructor only checks the stored components against the variant rules
    and does not normalize them. Components hold their percent-encoded form,
    absent components are None except ``path`` which is always a string.
    """

    scheme: str
    user: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    path: str
    query: Optional[str]
    fragment: Optional[str]
    variant: UriVariant
    descriptor: SchemeDescriptor = field(compare=False, repr=False)
    registry: SchemeRegistry = field(compare=False, repr=False)

    def __post_init__(self):
        """Validate the components against the rules of the variant."""
        scheme = self.scheme
        if self.descriptor.scheme != scheme or self.descriptor.variant is not self.variant:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` does not match its {self.variant.name} "
                "descriptor; use Uri.from_components() to create URIs.",
                context={"scheme": scheme},
            )
        rules = self.variant.rules

        if self.user is None and self.password is not None:
            raise InvalidArgumentError(
                "A password requires a user.",
                context={"scheme": scheme, "component": "pass"},
            )
        if self.user is not None and not rules.allows_user_info:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` does not accept user information.",
                context={"scheme": scheme, "component": "user"},
            )

        if self.host and not rules.allows_host:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` does not accept a host.",
                context={"scheme": scheme, "component": "host"},
            )
        if rules.requires_host and not self.host:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` requires a non-empty host.",
                context={"scheme": scheme, "component": "host"},
            )

        _validate_port(self.port)
        if self.port is not None and not rules.allows_port:
            raise InvalidPortError(self.port, f"scheme `{scheme}` does not accept a port")

        if not isinstance(self.path, str):
            raise InvalidArgumentError(
                "URI path must be a string.", context={"component": "path"}
            )
        if self.query is not None and not rules.allows_query:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` does not accept a query.",
                context={"scheme": scheme, "component": "query"},
            )
        if self.fragment is not None and not rules.allows_fragment:
            raise InvalidArgumentError(
                f"Scheme `{scheme}` does not accept a fragment.",
                context={"scheme": scheme, "component": "fragment"},
            )

    @classmethod
    def from_components(
        cls, components: Mapping[str, Any], registry: SchemeRegistry
    ) -> "Uri":
        """
        Create a Uri from a (possibly partial) component map.

        Raises:
            InvalidArgumentError: If the scheme is missing or a component
                is not valid for the scheme's variant.
            UnsupportedSchemeError: If the scheme is not registered.
            InvalidPortError: If the port is rejected.
        """
        normalized = normalize_components(components)
        scheme = normalized["scheme"]
        if not scheme or not scheme.strip():
            raise InvalidArgumentError(
                "Part URI scheme from components cannot be empty."
            )
        return cls._build(
            registry.resolve(scheme),
            registry,
            user=normalized["user"],
            password=normalized["pass"],
            host=normalized["host"],
            port=normalized["port"],
            path=normalized["path"],
            query=normalized["query"],
            fragment=normalized["fragment"],
        )

    @classmethod
    def _build(
        cls,
        descriptor: SchemeDescriptor,
        registry: SchemeRegistry,
        user: Optional[str],
        password: Optional[str],
        host: Optional[str],
        port: Optional[int],
        path: str,
        query: Optional[str],
        fragment: Optional[str],
        omit_default_port: bool = True,
    ) -> "Uri":
        # Normalizes the components; the rules are checked by __post_init__.
        # omit_default_port is False when the port is carried over unchanged
        # from another Uri.
        rules = descriptor.variant.rules

        # a password without a user is meaningless
        if not user:
            user, password = None, None
        else:
            user = normalize_component(user, USERINFO_SAFE)
            if password is not None:
                password = normalize_component(password, PASSWORD_SAFE)

        if host is not None:
            host = normalize_host(host)
            if rules.local_host_alias and host == rules.local_host_alias:
                host = ""
        if rules.always_render_authority:
            host = host or ""
        elif not host:
            host = None

        port = _validate_port(port)
        if (
            omit_default_port
            and descriptor.omit_default_port
            and descriptor.is_default_port(port)
        ):
            port = None

        has_authority = rules.always_render_authority or any(
            component is not None for component in (user, host, port)
        )
        path = _fit_path(normalize_component(path, PATH_SAFE), has_authority)
        query = normalize_component(query, QUERY_SAFE) if query else None
        fragment = normalize_component(fragment, FRAGMENT_SAFE) if fragment else None

        return cls(
            scheme=descriptor.scheme,
            user=user,
            password=password,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
            variant=descriptor.variant,
            descriptor=descriptor,
            registry=registry,
        )

    def _rebuild(self, descriptor: Optional[SchemeDescriptor] = None, **changes) -> "Uri":
        components = {
            "user": self.user,
            "password": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
        }
        components.update(changes)
        return self._build(
            descriptor or self.descriptor,
            self.registry,
            omit_default_port="port" in changes,
            **components,
        )

    # Mutators

    def with_scheme(self, scheme: str) -> "Uri":
        """
        Return a copy using another scheme of the same variant.

        Changing to a scheme of another variant needs a component
        re-derivation, see UriFactory.transform().
        """
        descriptor = self.registry.resolve(scheme)
        if descriptor.variant is not self.variant:
            raise InvalidArgumentError(
                f"Scheme `{descriptor.scheme}` is not compatible with "
                f"`{self.scheme}`; transform the URI instead.",
                context={"scheme": descriptor.scheme, "current": self.scheme},
            )
        return self._rebuild(descriptor)

    def with_user_info(self, user: Optional[str], password: Optional[str] = None) -> "Uri":
        """An empty or None user removes the user information."""
        return self._rebuild(user=user, password=password)

    def with_host(self, host: Optional[str]) -> "Uri":
        """An empty or None host removes the host."""
        return self._rebuild(host=host)

    def with_port(self, port: Optional[int]) -> "Uri":
        """A None port removes the port."""
        return self._rebuild(port=port)

    def with_path(self, path: str) -> "Uri":
        return self._rebuild(path=path or "")

    def with_query(self, query: Optional[str]) -> "Uri":
        """Set an already built query string; empty removes the query."""
        return self._rebuild(query=query)

    def with_fragment(self, fragment: Optional[str]) -> "Uri":
        return self._rebuild(fragment=fragment)

    # Accessors

    @property
    def user_info(self) -> Optional[str]:
        if self.user is None:
            return None
        if self.password is None:
            return self.user
        return f"{self.user}:{self.password}"

    @property
    def has_authority(self) -> bool:
        return self.variant.rules.always_render_authority or any(
            component is not None for component in (self.user, self.host, self.port)
        )

    @property
    def authority(self) -> Optional[str]:
        if not self.has_authority:
            return None
        authority = self.host or ""
        if self.user_info is not None:
            authority = f"{self.user_info}@{authority}"
        if self.port is not None:
            authority = f"{authority}:{self.port}"
        return authority

    @property
    def effective_port(self) -> Optional[int]:
        """The explicit port, or the scheme's default port."""
        return self.port if self.port is not None else self.descriptor.default_port

    def query_pairs(self) -> List[Tuple[str, Optional[str]]]:
        """Decoded key/value pairs of the query."""
        return decode_query(self.query)

    def components(self) -> ComponentMap:
        return {
            "scheme": self.scheme,
            "user": self.user,
            "pass": self.password,
            "host": self.host,
            "port": self.port,
            "path": self.path,
            "query": self.query,
            "fragment": self.fragment,
        }

    def copy(self) -> "Uri":
        """Return an equal but distinct instance."""
        return replace(self)

    def to_string(self) -> str:
        """Render the URI following RFC 3986 section 5.3."""
        parts = [self.scheme, ":"]
        authority = self.authority
        if authority is not None:
            parts.append("//")
            parts.append(authority)
        parts.append(_fit_path(self.path, authority is not None))
        if self.query is not None:
            parts.append("?")
            parts.append(self.query)
        if self.fragment is not None:
            parts.append("#")
            parts.append(self.fragment)
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()
