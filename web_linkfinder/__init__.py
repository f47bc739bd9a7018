"""
web_linkfinder
==============
Extract candidate resource paths from a fetched document and expand each
one into the full chain of its parent directories on the same origin.

Package structure
-----------------
web_linkfinder/
├── __init__.py       – package init and public API
├── __main__.py       – ``python -m web_linkfinder``
├── config.py         – configuration constants
├── session.py        – requests.Session factory and fetch helper
├── cli.py            – argparse CLI
├── extraction/       – sub-package: the extraction pipeline
│   ├── pattern.py    – quoted link scan (LinkFinder expression)
│   ├── resolver.py   – absolute / relative / unparseable classification
│   ├── expander.py   – sub-path expansion and joining
│   └── links.py      – extract_links / get_links entry points
└── utils/
    ├── log.py        – logging setup
    └── url.py        – scheme / host / origin helpers

Quick start
-----------
    from web_linkfinder import build_session, fetch, get_links

    session = build_session()
    links = get_links(fetch(session, "https://example.com/"))
"""

from web_linkfinder.extraction import (
    extract_links,
    get_links,
    get_sub_paths_from_path,
    iter_link_candidates,
)
from web_linkfinder.session import build_session, fetch

__version__ = "1.0.0"

__all__ = [
    "build_session",
    "extract_links",
    "fetch",
    "get_links",
    "get_sub_paths_from_path",
    "iter_link_candidates",
]
