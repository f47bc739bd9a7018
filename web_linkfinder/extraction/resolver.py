"""
Classification of raw link candidates.

Every candidate is one of:

* ``Absolute``    – ``scheme://host/...`` or protocol-relative ``//host/...``
* ``Relative``    – no scheme and no authority; the text itself is a path
* ``Unparseable`` – looks absolute but cannot be split into a usable host

The decision is made syntactically, before any parsing, so a relative path
is never mistaken for a broken URL or vice versa.
"""

import urllib.parse
from dataclasses import dataclass

from web_linkfinder.utils.log import log
from web_linkfinder.utils.url import has_scheme, is_network_path, is_valid_host


@dataclass(frozen=True)
class Absolute:
    """A scheme-qualified or protocol-relative reference."""

    host: str
    path: str

    @property
    def rooted(self) -> bool:
        return True


@dataclass(frozen=True)
class Relative:
    """A path fragment to be resolved against the page it came from."""

    path: str

    @property
    def rooted(self) -> bool:
        return self.path.startswith("/")


@dataclass(frozen=True)
class Unparseable:
    """A candidate that is neither a usable absolute URL nor a path."""

    link: str
    reason: str


Resolution = Absolute | Relative | Unparseable


def classify_link(link: str) -> Resolution:
    """Sort *link* into one of the three resolution outcomes."""
    if not has_scheme(link) and not is_network_path(link):
        return Relative(link)

    try:
        parts = urllib.parse.urlsplit(link)
        # .port validates the port lazily and raises on garbage
        parts.port
    except ValueError as exc:
        return Unparseable(link, str(exc))

    host = parts.hostname or ""
    if not is_valid_host(host):
        return Unparseable(link, f"invalid host {host!r}")
    return Absolute(host, parts.path)


def resolve_link(link: str, base_url: str) -> Absolute | Relative | None:
    """
    Classify *link* and apply the same-host filter against *base_url*.

    Returns ``None`` for links on another host (silently filtered) and for
    unparseable links (reported on the package logger).
    """
    resolution = classify_link(link)

    if isinstance(resolution, Unparseable):
        log.error("[ERR] Could not parse given url %r: %s",
                  resolution.link, resolution.reason)
        return None

    if isinstance(resolution, Absolute):
        base_host = urllib.parse.urlsplit(base_url).hostname
        if resolution.host != base_host:
            log.debug("[SKIP] %s is not on %s", link, base_host)
            return None

    return resolution
