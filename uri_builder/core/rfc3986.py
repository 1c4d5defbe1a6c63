"""
Regular expressions for the RFC 3986 grammar rules used by the parser and
by host/userinfo validation.

Each pattern is annotated with the ABNF rule it implements.
"""

import re

_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

# URI-reference split, RFC 3986 Appendix B
URI_SPLIT_RE = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+\-.]*$")

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
USERINFO_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT_ENCODED})*$")

# reg-name = *( unreserved / pct-encoded / sub-delims )
REG_NAME_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT_ENCODED})*$")

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
IPV_FUTURE_RE = re.compile(rf"^v[0-9A-Fa-f]+\.[{_UNRESERVED}{_SUB_DELIMS}:]+$")

# port = *DIGIT
PORT_RE = re.compile(r"^[0-9]*$")

# Characters never allowed anywhere in a URI: controls, space and the
# "unwise" set of RFC 2396
FORBIDDEN_CHARS_RE = re.compile(r"[\x00-\x20\x7f\"<>\\^`{|}]")

# A "%" that does not start a pct-encoded triplet
MALFORMED_PCT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
