"""
Command-line interface for the link finder.
"""

import argparse
import logging
import sys

import requests
import urllib3

from web_linkfinder.config import REQUEST_TIMEOUT
from web_linkfinder.extraction.links import get_links
from web_linkfinder.session import build_session, fetch
from web_linkfinder.utils.log import ci_endgroup, ci_group, log, setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch one page and list every same-origin URL, and every "
                    "parent directory of it, referenced in its markup or "
                    "scripts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m web_linkfinder https://example.com\n"
            "  python -m web_linkfinder example.com/app/ --debug\n"
            "  python -m web_linkfinder https://10.0.0.1 --no-verify-ssl\n"
        ),
    )
    parser.add_argument(
        "url",
        help="Page to fetch (e.g. https://example.com)",
    )
    parser.add_argument(
        "--timeout", type=float, default=REQUEST_TIMEOUT,
        help=f"Request timeout in seconds (default: {REQUEST_TIMEOUT})",
    )
    parser.add_argument(
        "--no-verify-ssl", dest="verify_ssl", action="store_false", default=True,
        help="Disable TLS certificate verification",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable verbose debug logging",
    )
    parser.add_argument(
        "--log-file",
        help="Write detailed logs to this file (always at DEBUG level)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_file=args.log_file)

    if args.debug:
        logging.getLogger("urllib3").setLevel(logging.DEBUG)

    if not args.verify_ssl:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        log.warning("TLS certificate verification is DISABLED (--no-verify-ssl)")

    target_url = args.url
    if not target_url.startswith(("http://", "https://")):
        target_url = "https://" + target_url

    session = build_session(verify_ssl=args.verify_ssl)
    try:
        response = fetch(session, target_url, timeout=args.timeout)
    except requests.RequestException as exc:
        log.error("[ERR] Could not fetch %s: %s", target_url, exc)
        return 1
    finally:
        session.close()

    links = get_links(response)

    ci_group(f"Links found on {response.url}")
    for link in sorted(links):
        print(link)
    ci_endgroup()

    log.info("[LINK] %d link(s) found on %s", len(links), response.url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
