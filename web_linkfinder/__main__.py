"""
Main entry point for the web_linkfinder package.

Allows running the link finder as: python -m web_linkfinder
"""

import sys

from web_linkfinder.cli import main

if __name__ == "__main__":
    sys.exit(main())
