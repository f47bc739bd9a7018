"""
HTTP session creation for fetching the documents links are extracted from.
"""

import random

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from web_linkfinder.config import (
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_STATUS_CODES,
    USER_AGENTS,
)
from web_linkfinder.utils.log import log


def build_session(verify_ssl: bool = True) -> requests.Session:
    """Return a ``requests.Session`` with retry logic, keep-alive and a
    randomised User-Agent."""
    session = requests.Session()
    retry = Retry(
        total=MAX_RETRIES,
        backoff_factor=0.5,
        status_forcelist=list(RETRY_STATUS_CODES),
    )
    adapter = HTTPAdapter(
        max_retries=retry,
        pool_connections=10,
        pool_maxsize=10,
    )
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": random.choice(USER_AGENTS),
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "application/json;q=0.9,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
    })
    return session


def fetch(
    session: requests.Session,
    url: str,
    timeout: float = REQUEST_TIMEOUT,
) -> requests.Response:
    """
    GET *url*, following redirects, so that ``response.url`` is the
    effective location the body was served from.

    Network errors propagate as ``requests.RequestException``.
    """
    log.debug("[FETCH] GET %s", url)
    resp = session.get(url, timeout=timeout, allow_redirects=True)
    if resp.url != url:
        log.info("[FETCH] %s redirected to %s", url, resp.url)
    log.info("[FETCH] %s → HTTP %s (%d bytes)",
             resp.url, resp.status_code, len(resp.content))
    return resp
