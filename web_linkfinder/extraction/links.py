"""
Link extraction entry points.

Given the text of a fetched document and the URL it was served from,
collect every same-origin URL its embedded links point at, together with
every parent directory along the way.
"""

import requests

from web_linkfinder.extraction.expander import (
    add_link_to_set_of_links,
    get_sub_paths_from_path,
)
from web_linkfinder.extraction.pattern import iter_link_candidates
from web_linkfinder.extraction.resolver import resolve_link
from web_linkfinder.utils.log import log


def extract_links(text: str, base_url: str) -> set[str]:
    """
    Return the set of absolute URLs discovered in *text*.

    Example: with a base of ``http://localhost/`` and a body containing
    ``"homepage/assets/img/icons/handshake.svg"`` the result holds::

        http://localhost/homepage
        http://localhost/homepage/assets
        http://localhost/homepage/assets/img
        http://localhost/homepage/assets/img/icons
        http://localhost/homepage/assets/img/icons/handshake.svg
    """
    log.debug("enter: extract_links(%s)", base_url)
    links: set[str] = set()

    for link in iter_link_candidates(text):
        resolution = resolve_link(link, base_url)
        if resolution is None:
            continue
        for sub_path in get_sub_paths_from_path(resolution.path):
            add_link_to_set_of_links(
                sub_path, base_url, links, rooted=resolution.rooted
            )

    log.debug("exit: extract_links -> %d link(s)", len(links))
    return links


def get_links(response: requests.Response) -> set[str]:
    """
    Run :func:`extract_links` over a completed response, using its final
    (post-redirect) URL as the base.
    """
    try:
        text = response.text
    except (LookupError, UnicodeDecodeError) as exc:
        log.error("[ERR] Could not decode body of %s: %s", response.url, exc)
        return set()
    return extract_links(text, response.url)
