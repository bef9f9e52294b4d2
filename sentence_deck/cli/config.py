"""Configuration management for the sentence-deck CLI."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from sentence_deck.pacing.duration import PacingConfig
from sentence_deck.segmenter.block_segmenter import SegmenterConfig
from sentence_deck.segmenter.sectionizer import HeadingHeuristics


class Config:
    """Configuration loaded from .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Load configuration from .env file."""
        if env_file:
            load_dotenv(env_file)
        else:
            # Load from .env in the working directory
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)

        # Segmentation and pacing
        self.heading_heuristics = HeadingHeuristics.from_env()
        self.segmenter_config = SegmenterConfig.from_env()
        self.pacing_config = PacingConfig.from_env()

        # Output
        self.output_format = os.getenv("OUTPUT_FORMAT", "json").lower()

        # MCP Server
        self.mcp_server_name = os.getenv("MCP_SERVER_NAME", "Sentence Deck")
