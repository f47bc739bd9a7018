"""
Lexical scan for link-like quoted strings.

The matching policy is the LinkFinder expression
(https://github.com/GerbenJavado/LinkFinder, including the change from
pull request #66)::

    ("|')( scheme://host.tld... | //host.tld...
          | /path | ./path | ../path
          | dir/file.ext | dir/endpoint
          | file.(php|asp|aspx|jsp|json|action|html|js|txt|xml) )("|')

No alternative may contain a quote character, so every match is an opening
quote, a quote-free body and the very next quote.  The scan therefore walks
consecutive quote positions and full-matches each body on its own.  The
body expression is written with possessive quantifiers and anchored
lookaheads, which keeps every check linear in the body length; response
bodies are third-party input and must not be able to stall the scan.
"""

import re
from collections.abc import Iterator

from web_linkfinder.config import QUOTE_CHARS, WEB_EXTENSIONS

_PATH = r"[a-zA-Z0-9_\-/]"
_QUERY = r"(?:[?|#][^\"|']*+)?"
_EXT_LOOKBEHIND = "|".join(
    rf"(?<=[a-zA-Z0-9_\-.]\.{ext})" for ext in WEB_EXTENSIONS
)

LINKFINDER_PATTERN = "|".join((
    # scheme://host.tld/... or //host.tld/...
    r"(?:[a-zA-Z]{1,10}://|//)[^\"'/]+\.[a-zA-Z]{2,}[^\"']*+",
    # /path, ./path, ../path; not a comment, template or regex literal
    r"(?:/|\.\./|\./)[^\"'><,;| *()%$^/\\\[\]][^\"'><,;|()]++",
    # dir/file.ext
    rf"(?={_PATH}+/{_PATH}){_PATH}++\.(?:[a-zA-Z]{{1,4}}|action){_QUERY}",
    # dir/endpoint
    rf"(?={_PATH}+/{_PATH}{{3}}){_PATH}++{_QUERY}",
    # file.ext
    rf"[a-zA-Z0-9_\-.]++(?:{_EXT_LOOKBEHIND}){_QUERY}",
))

LINKFINDER_REGEX = re.compile(LINKFINDER_PATTERN)

_QUOTE_RE = re.compile("[" + re.escape(QUOTE_CHARS) + "]")


def iter_link_candidates(text: str) -> Iterator[str]:
    """
    Yield every quoted link candidate in *text*, quotes removed, in the
    order they appear.

    A matched candidate consumes its closing quote; a rejected body leaves
    its closing quote free to open the next candidate.
    """
    opening: int | None = None
    for quote in _QUOTE_RE.finditer(text):
        position = quote.start()
        if opening is not None:
            body = text[opening + 1:position]
            if LINKFINDER_REGEX.fullmatch(body):
                yield body
                opening = None
                continue
        opening = position
