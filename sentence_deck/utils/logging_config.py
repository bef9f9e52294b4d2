"""Simple logging setup - redirect all logs to stderr so stdout carries only slide output."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. Use ERROR level for MCP and quiet runs, INFO when verbose."""
    level = logging.INFO if verbose else logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
