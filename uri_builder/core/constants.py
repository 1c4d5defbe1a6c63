"""
Constants module for the URI builder.

This module centralizes the magic numbers and strings of RFC 3986 handling
into named constants with clear meanings.
"""

# =============================================================================
# PORT CONSTANTS
# =============================================================================

# Established TCP and UDP port range (inclusive)
MIN_PORT = 0
MAX_PORT = 65535

FTP_DEFAULT_PORT = 21
SFTP_DEFAULT_PORT = 22
FTPS_DEFAULT_PORT = 990
HTTP_DEFAULT_PORT = 80
HTTPS_DEFAULT_PORT = 443
WS_DEFAULT_PORT = 80
WSS_DEFAULT_PORT = 443

# =============================================================================
# COMPONENT MAP CONSTANTS
# =============================================================================

COMPONENT_KEYS = (
    "scheme",
    "user",
    "pass",
    "host",
    "port",
    "path",
    "query",
    "fragment",
)

# =============================================================================
# RFC 3986 CHARACTER CLASSES
# =============================================================================

ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
DIGIT = "0123456789"
HEXDIG = DIGIT + "ABCDEFabcdef"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = ALPHA + DIGIT + "-._~"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
SUB_DELIMS = "!$&'()*+,;="

# Extra characters allowed literally per component (besides unreserved and
# percent-encoded triplets)
USERINFO_SAFE = SUB_DELIMS
PASSWORD_SAFE = SUB_DELIMS + ":"
PATH_SAFE = SUB_DELIMS + ":@/"
QUERY_SAFE = SUB_DELIMS + ":@/?"
FRAGMENT_SAFE = SUB_DELIMS + ":@/?"

# =============================================================================
# SEPARATORS
# =============================================================================

DEFAULT_QUERY_SEPARATOR = "&"
QUERY_KEY_VALUE_SEPARATOR = "="
