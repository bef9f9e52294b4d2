"""Serve command - starts the MCP server."""

import logging
import sys

from sentence_deck.cli.config import Config

logger = logging.getLogger(__name__)


def serve_command(config: Config, verbose: bool = False):
    """Start the MCP server over stdio."""
    if verbose:
        logger.info(f"🚀 Starting {config.mcp_server_name}...")
        logger.info(f"⏱️  Reading speed: {config.pacing_config.words_per_minute} wpm")

    # Import and start MCP server
    try:
        from sentence_deck.mcp_server.server import start_server

        start_server(config)
    except ImportError as e:
        logger.error(f"Failed to import MCP server: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start MCP server: {e}")
        sys.exit(1)
