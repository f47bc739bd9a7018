"""
Sub-path expansion: every directory that leads to a discovered resource is
itself worth requesting.
"""

import re
import urllib.parse

from web_linkfinder.config import URL_PATH_SAFE
from web_linkfinder.utils.log import log
from web_linkfinder.utils.url import same_origin

# A "%" that does not start a %XX escape.
_STRAY_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def get_sub_paths_from_path(path: str) -> list[str]:
    """
    Return every sub-path of *path*, longest first.

    ``homepage/assets/img/icons/handshake.svg`` gives::

        homepage/assets/img/icons/handshake.svg
        homepage/assets/img/icons
        homepage/assets/img
        homepage/assets
        homepage

    Leading, trailing and doubled slashes are ignored.
    """
    log.debug("enter: get_sub_paths_from_path(%s)", path)
    paths: list[str] = []

    parts = [part for part in path.split("/") if part]
    while parts:
        possible_path = "/".join(parts)
        if possible_path:
            paths.append(possible_path)
        parts.pop()

    log.debug("exit: get_sub_paths_from_path -> %s", paths)
    return paths


def add_link_to_set_of_links(
    link: str,
    base_url: str,
    links: set[str],
    rooted: bool = False,
) -> None:
    """
    Join the sub-path *link* onto *base_url* and add the result to *links*.

    With *rooted* the sub-path is resolved from the root of the host instead
    of from the directory of *base_url*.  Results on another origin, or that
    collapse to the bare root, are dropped.

    Rooted joins differ from joining the bare sub-path only when the path of
    *base_url* is not "/"; this is intended, a link to "/a/b" names "/a" as a
    parent, not a directory below the current page.
    """
    try:
        reference = urllib.parse.quote(
            _STRAY_PERCENT_RE.sub("%25", link), safe=URL_PATH_SAFE
        )
        if rooted:
            reference = "/" + reference
        new_url = urllib.parse.urljoin(base_url, reference)
        path = urllib.parse.urlsplit(new_url).path
    except ValueError as exc:
        log.error("[ERR] Could not join %r to the base url %s: %s",
                  link, base_url, exc)
        return

    if path in ("", "/") or not same_origin(new_url, base_url):
        log.debug("[SKIP] %s does not lead anywhere below %s", link, base_url)
        return

    links.add(new_url)
