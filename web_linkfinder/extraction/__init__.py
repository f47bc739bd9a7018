"""Link extraction: lexical scan, resolution and sub-path expansion."""

from web_linkfinder.extraction.expander import (
    add_link_to_set_of_links,
    get_sub_paths_from_path,
)
from web_linkfinder.extraction.links import extract_links, get_links
from web_linkfinder.extraction.pattern import (
    LINKFINDER_REGEX,
    iter_link_candidates,
)
from web_linkfinder.extraction.resolver import (
    Absolute,
    Relative,
    Unparseable,
    classify_link,
    resolve_link,
)

__all__ = [
    "Absolute",
    "LINKFINDER_REGEX",
    "Relative",
    "Unparseable",
    "add_link_to_set_of_links",
    "classify_link",
    "extract_links",
    "get_links",
    "get_sub_paths_from_path",
    "iter_link_candidates",
    "resolve_link",
]
