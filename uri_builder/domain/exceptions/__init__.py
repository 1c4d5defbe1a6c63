"""
Standardized Exception Hierarchy for the URI builder.

Every error raised by the library derives from UriBuilderError and carries
an error code plus a context dictionary describing the offending input.
"""

from typing import Any, Dict, Optional


class UriBuilderError(Exception):
    """
    Base exception for all URI builder errors.

    Provides a standardized interface with error codes and context.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.original_exception = original_exception

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
            "original_exception": (
                str(self.original_exception) if self.original_exception else None
            ),
        }


class ParseError(UriBuilderError, ValueError):
    """Raised when a string violates the RFC 3986 URI grammar."""

    def __init__(self, uri: str, reason: str, **kwargs):
        super().__init__(
            message=f"Cannot parse URI `{uri}`: {reason}",
            error_code="URI_PARSE_ERROR",
            context={"uri": uri, "reason": reason},
            **kwargs,
        )
        self.uri = uri
        self.reason = reason


class InvalidArgumentError(UriBuilderError, ValueError):
    """Raised when a component map or a component value is structurally invalid."""

    def __init__(self, message: str, error_code: str = "INVALID_ARGUMENT", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)


class UnsupportedSchemeError(InvalidArgumentError):
    """Raised when a scheme has no entry in the scheme registry."""

    def __init__(self, scheme: str, **kwargs):
        super().__init__(
            message=f"Scheme `{scheme}` has not yet been supported by the library.",
            error_code="UNSUPPORTED_SCHEME",
            context={"scheme": scheme},
            **kwargs,
        )
        self.scheme = scheme


class InvalidPortError(InvalidArgumentError):
    """Raised when a port is out of range or not accepted by a scheme."""

    def __init__(self, port: Any, reason: str, **kwargs):
        super().__init__(
            message=f"Invalid port `{port}`: {reason}",
            error_code="INVALID_PORT",
            context={"port": port, "reason": reason},
            **kwargs,
        )
        self.port = port


class UninitializedBuilderError(UriBuilderError, RuntimeError):
    """Raised when a builder is used before being seeded with a URI."""

    def __init__(self, operation: str, **kwargs):
        super().__init__(
            message=(
                f"Cannot call `{operation}`: the builder is not initialized with "
                "any URI. Seed it with from_string, from_uri or from_components."
            ),
            error_code="BUILDER_NOT_INITIALIZED",
            context={"operation": operation},
            **kwargs,
        )
        self.operation = operation


__all__ = [
    "UriBuilderError",
    "ParseError",
    "InvalidArgumentError",
    "UnsupportedSchemeError",
    "InvalidPortError",
    "UninitializedBuilderError",
]
