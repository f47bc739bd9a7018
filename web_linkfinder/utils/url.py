"""
URL inspection helpers shared by the resolver and the expander.
"""

import re
import urllib.parse

# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." ) ":"
_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")

# Code points a host may never contain (WHATWG forbidden host code points,
# minus ':' which IPv6 literals keep once urllib strips the brackets).
_FORBIDDEN_HOST_RE = re.compile(r"[\x00-\x20#%/<>?@\[\\\]^|\x7f]")


def has_scheme(raw: str) -> bool:
    """``True`` when *raw* starts with ``scheme:``."""
    return _SCHEME_RE.match(raw) is not None


def is_network_path(raw: str) -> bool:
    """``True`` for protocol-relative references such as ``//cdn.host/x``."""
    return raw.startswith("//")


def is_valid_host(host: str) -> bool:
    """Reject empty hosts and hosts carrying forbidden characters."""
    return bool(host) and _FORBIDDEN_HOST_RE.search(host) is None


def url_origin(url: str) -> tuple[str, str, int | None]:
    """
    Return ``(scheme, host, port)`` for *url*, lower-cased, with the default
    port of http/https folded into ``None``.

    Raises ``ValueError`` for URLs urllib cannot split (bad IPv6 literal,
    non-numeric or out-of-range port).
    """
    parts = urllib.parse.urlsplit(url)
    scheme = parts.scheme.lower()
    port = parts.port
    if (scheme, port) in (("http", 80), ("https", 443)):
        port = None
    return scheme, (parts.hostname or ""), port


def same_origin(url: str, base: str) -> bool:
    """Compare scheme, host and port of two absolute URLs."""
    try:
        return url_origin(url) == url_origin(base)
    except ValueError:
        return False
