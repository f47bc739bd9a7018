"""
Configuration constants for the link finder.
"""

# ---------------------------------------------------------------------------
# HTTP tuning
# ---------------------------------------------------------------------------
REQUEST_TIMEOUT = 30
MAX_RETRIES = 3
RETRY_STATUS_CODES = (500, 502, 503, 504)

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.5 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64; rv:127.0) Gecko/20100101 Firefox/127.0",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36 Edg/126.0.0.0",
]

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------
# Extensions that make a bare, slash-less filename worth following.
WEB_EXTENSIONS = (
    "php", "asp", "aspx", "jsp", "json", "action",
    "html", "js", "txt", "xml",
)

# Characters that open and close a candidate link.
QUOTE_CHARS = "'\""

# Characters left untouched when a discovered path is turned into a URL
# reference.  Everything else outside [A-Za-z0-9_.~-] is percent-encoded,
# as is any "%" that does not already start a %XX escape.
URL_PATH_SAFE = "/:@!$&'()*+,;=?#%[]"
